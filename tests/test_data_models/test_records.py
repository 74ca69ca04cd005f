import unittest

from clever_roster import cdm, CleverClient
from ..constants import load_fixture


class TestToken(unittest.TestCase):

    def setUp(self):
        self.token_json = load_fixture('tokens')['test_base']['data'][0]

    def test_fields(self):
        token = cdm.CleverToken(self.token_json)
        self.assertEqual(token.owner, {'type': 'district',
                                       'id': '5800e1c5e16c4230146fce0'})
        self.assertEqual(token.owner_id, '5800e1c5e16c4230146fce0')
        self.assertEqual(token.access_token,
                         '0ed35a0de3005aa1c77df310ac0375a6158881c4')
        self.assertEqual(token.scopes, ['read:district_admins'])
        self.assertEqual(token.created, '2017-02-02T20:46:56.435Z')

    def test_wrapped_item(self):
        token = cdm.CleverToken({'data': self.token_json})
        self.assertEqual(token, cdm.CleverToken(self.token_json))

    def test_empty_item(self):
        token = cdm.CleverToken({})
        self.assertIsNone(token.owner_id)
        self.assertIsNone(token.access_token)
        self.assertEqual(token.scopes, [])

    def test_str_hides_token(self):
        token = cdm.CleverToken(self.token_json)
        self.assertNotIn(token.access_token, str(token))
        self.assertNotIn(token.access_token, repr(token))


class TestTeacher(unittest.TestCase):

    def test_to_dict(self):
        teacher_json = load_fixture('teachers')['teacher_1']
        teacher = cdm.CleverTeacher(teacher_json)
        self.assertEqual(teacher.to_dict(), {
            'uid': teacher_json['data']['id'],
            'email': teacher_json['data']['email'],
            'first_name': teacher_json['data']['name']['first'],
            'last_name': teacher_json['data']['name']['last'],
            'provider': 'clever'
        })
        self.assertEqual(tuple(teacher.to_dict()), cdm.CleverTeacher.fields)


class TestCourse(unittest.TestCase):

    def test_fields(self):
        course = cdm.CleverCourse(load_fixture('courses')['course_1'])
        self.assertEqual(course.to_dict(), {
            'uid': 'c1',
            'district': '5800e1c5e16c4230146fce0',
            'name': 'Algebra I',
            'number': 'MATH-101'
        })


class TestSection(unittest.TestCase):

    def setUp(self):
        self.fixtures = load_fixture('sections')

    def test_fields(self):
        section_json = self.fixtures['section_1']
        section = cdm.CleverSection(section_json)
        self.assertEqual(section.uid, '5')
        self.assertEqual(section.name, section_json['data']['name'])
        self.assertEqual(section.grades, section_json['data']['grade'])
        self.assertEqual(section.period, section_json['data']['period'])
        self.assertEqual(section.course, 'c1')
        self.assertEqual(section.students, ['6', '7', '8'])
        self.assertEqual(section.provider, 'clever')
        self.assertEqual(tuple(section.to_dict()), cdm.CleverSection.fields)

    def test_primary_teacher_only(self):
        section = cdm.CleverSection(self.fixtures['section_1'],
                                    client=CleverClient())
        self.assertEqual(section.teachers, ['5'])

    def test_shared_classes(self):
        client = CleverClient(shared_classes=True)
        section = cdm.CleverSection(self.fixtures['section_1'], client=client)
        self.assertEqual(section.teachers, ['5', '2'])

    def test_no_primary_teacher(self):
        section = cdm.CleverSection({'data': {'id': '9',
                                              'teachers': ['1', '2']}})
        self.assertEqual(section.teachers, ['1', '2'])

    def test_empty_roster(self):
        section = cdm.CleverSection({'data': {'id': '9'}})
        self.assertEqual(section.teachers, [])
        self.assertEqual(section.students, [])
        self.assertIsNone(section.course)


class TestClassroom(unittest.TestCase):

    def setUp(self):
        sections = load_fixture('sections')
        self.section = cdm.CleverSection(sections['section_1'])
        self.course = cdm.CleverCourse(load_fixture('courses')['course_1'])

    def test_from_section(self):
        classroom = cdm.CleverClassroom.from_section(self.section, self.course)
        self.assertEqual(classroom.to_dict(), {
            'uid': '5',
            'name': 'Algebra I - Period 1',
            'period': '1',
            'course_number': 'MATH-101',
            'grades': '9',
            'provider': 'clever'
        })

    def test_without_course(self):
        classroom = cdm.CleverClassroom.from_section(self.section)
        self.assertIsNone(classroom.course_number)

    def test_from_dict(self):
        classroom = cdm.CleverClassroom.from_section(self.section, self.course)
        self.assertEqual(cdm.CleverClassroom.from_dict(classroom.to_dict()),
                         classroom)


class TestEnrollments(unittest.TestCase):

    def setUp(self):
        self.sections = [
            cdm.CleverSection({'data': {'id': 'A', 'teachers': ['T1'],
                                        'students': ['S1', 'S2', 'S3']}}),
            cdm.CleverSection({'data': {'id': 'B', 'teachers': ['T2'],
                                        'students': ['S4', 'S5', 'S6']}})
        ]

    @staticmethod
    def group(enrollments):
        grouped = {}
        for enrollment in enrollments:
            grouped.setdefault(enrollment.classroom_uid, []) \
                .append(enrollment.user_uid)
        return grouped

    def test_all_sections(self):
        enrollments = cdm.parse_enrollments(self.sections)
        self.assertEqual(set(enrollments), {'student', 'teacher'})
        self.assertEqual(self.group(enrollments['student']),
                         {'A': ['S1', 'S2', 'S3'], 'B': ['S4', 'S5', 'S6']})
        self.assertEqual(self.group(enrollments['teacher']),
                         {'A': ['T1'], 'B': ['T2']})

    def test_filtered(self):
        enrollments = cdm.parse_enrollments(self.sections, ['A'])
        self.assertEqual(self.group(enrollments['student']),
                         {'A': ['S1', 'S2', 'S3']})
        self.assertEqual(self.group(enrollments['teacher']), {'A': ['T1']})

    def test_no_sections(self):
        self.assertEqual(cdm.parse_enrollments([]),
                         {'student': [], 'teacher': []})

    def test_to_dict(self):
        enrollment = cdm.CleverEnrollment(classroom_uid='A', user_uid='S1')
        self.assertEqual(enrollment.to_dict(),
                         {'classroom_uid': 'A', 'user_uid': 'S1'})
        self.assertEqual(hash(enrollment),
                         hash(cdm.CleverEnrollment('A', 'S1')))


class TestFromDict(unittest.TestCase):

    """Every record type is rebuilt unchanged from its dictionary."""

    def records(self):
        tokens = load_fixture('tokens')['test_base']['data']
        section_json = load_fixture('sections')['section_1']
        return [
            cdm.CleverToken(tokens[0]),
            cdm.CleverTeacher(load_fixture('teachers')['teacher_1']),
            cdm.CleverCourse(load_fixture('courses')['course_1']),
            cdm.CleverSection(section_json,
                              client=CleverClient(shared_classes=True)),
            cdm.CleverEnrollment(classroom_uid='5', user_uid='6')
        ]

    def test_rebuilt_equal(self):
        for record in self.records():
            record_type = type(record)
            with self.subTest(record_type=record_type.__name__):
                rebuilt = record_type.from_dict(record.to_dict())
                self.assertIsInstance(rebuilt, record_type)
                self.assertEqual(rebuilt, record)
                self.assertEqual(hash(rebuilt), hash(record))
                self.assertEqual(tuple(rebuilt.to_dict()), record_type.fields)

    def test_rebuilt_token_owner(self):
        token = cdm.CleverToken(
            load_fixture('tokens')['test_base']['data'][0])
        rebuilt = cdm.CleverToken.from_dict(token.to_dict())
        self.assertEqual(rebuilt.owner_id, token.owner_id)

    def test_missing_keys(self):
        rebuilt = cdm.CleverTeacher.from_dict({'uid': '6'})
        self.assertEqual(rebuilt.uid, '6')
        self.assertIsNone(rebuilt.email)


if __name__ == '__main__':
    unittest.main()

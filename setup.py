import pathlib
import setuptools


HERE = pathlib.Path(__file__).parent

README = (HERE/'README.md').read_text()

setuptools.setup(
    name='clever_roster',
    version='1.0',
    description='A client for fetching district rosters from the Clever '
                'API.',
    long_description=README,
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python'
    ],
    packages=setuptools.find_packages(include=['clever_roster',
                                               'clever_roster.*']),
    install_requires=['requests'],
    extras_require={'test': ['responses', 'pytest']},
    python_requires=">=3.8"
)

from setuptools import setup, find_namespace_packages

setup(
    name='jhsiao-filestream',
    version='0.0.1',
    author='Jason Hsiao',
    author_email='oaishnosaj@gmail.com',
    description='Stream delimited records to/from flat files',
    packages=find_namespace_packages(include=['jhsiao.*']),
    python_requires='>=3.6',
    extras_require={'test': ['pytest']},
)

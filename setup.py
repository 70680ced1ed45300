"""Package build script"""
import re
import setuptools

ver_file = 'VERSION'

# Pull package version number from the VERSION file
with open(ver_file, 'r', encoding='utf-8') as f:
    verstr = re.match(r'^v?(\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?)\s*$', f.read())
    if verstr is None:
        raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

    __version__ = verstr.groups()[0]

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="decipin",
    version=__version__,
    author="",
    author_email="",
    description="Encode bounded decimal-degree coordinates as fixed-length DeciPin codes and back.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_namespace_packages(
        include=('decipin*', ),
        exclude=('*tests', 'tests*')
    ),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1',
    ],
    extras_require={
        'test': ['pytest'],
    },
)

import os
from pathlib import Path
from setuptools import setup, find_packages


BASE_DIR = Path(__file__).parent
with open(BASE_DIR / "nativedicom" / "_version.py") as f:
    exec(f.read())

with open(BASE_DIR / 'README.md') as f:
    long_description = f.read()


def data_files_inventory():
    root = BASE_DIR / "nativedicom" / "tests" / "testfiles"
    files = [
        f.relative_to(BASE_DIR / "nativedicom")
        for f in root.glob("**/*")
        if f.is_file() and f.suffix != ".pyc"
    ]
    return [os.fspath(f) for f in files]


setup(
    name="nativedicom",
    version=__version__,  # noqa: F821
    author="nativedicom contributors",
    description=(
        "A pure Python package for reading and writing DICOM Native DICOM "
        "Model XML"
    ),
    long_description=long_description,
    long_description_content_type='text/markdown',
    license="MIT",
    keywords="dicom python medical imaging xml ps3.19",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Developers",
        "Intended Audience :: Healthcare Industry",
        "Intended Audience :: Science/Research",
        "Development Status :: 4 - Beta",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
        "Topic :: Software Development :: Libraries"
    ],
    packages=find_packages(),
    package_data={
        'nativedicom': data_files_inventory(),
    },
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.9',
    install_requires=[],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": ["nativedicom=nativedicom.cli.main:main"],
    },
)

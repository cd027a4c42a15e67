import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="seqid",
    version="0.1.0",
    description="A package and executable for parsing Illumina FASTQ sequence identifiers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=[
        "pyyaml"
        ],
    packages=setuptools.find_packages(exclude=["test_*"]),
    package_data={"seqid": ["data/*.yml"]},
    include_package_data=True,
    entry_points={'console_scripts': [
        'seqid=seqid.__main__:main',
    ]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
)

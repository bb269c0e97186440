import setuptools


def read_readme():
    with open("README.md", "r", encoding="utf-8") as fh:
        readme = fh.read()
    return readme


def read_version():
    """Read the version string from approvalrunoff/__init__.py."""
    with open("approvalrunoff/__init__.py", "r", encoding="utf-8") as fh:
        for line in fh:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"')
    raise RuntimeError("Version string not found in approvalrunoff/__init__.py.")


setuptools.setup(
    name="approvalrunoff",
    version=read_version(),
    description="Strategic voting under Approval Voting with runoff (Fishburn and Brams)",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    license="MIT License",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Intended Audience :: Science/Research",
    ],
    packages=["approvalrunoff"],
    python_requires=">=3.7",
    install_requires=[
        "numpy>=1.17",
        "ruamel.yaml >= 0.16.13",
    ],
    extras_require={
        "dev": [
            "pytest>=6",
            "coverage[toml]>=5.3",
            "black==22.1.0",
        ]
    },
)

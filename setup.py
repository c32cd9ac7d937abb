from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="vasomap",
    version="1.0.0",
    author="Erick Gross",
    author_email="erickgross1924@gmail.com",
    description="In-memory query library for anatomical vessel graphs: shortest paths, alias search and region trees",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/ErickGross-19/Vascular-Network-Validity-",
    packages=find_packages(exclude=["tests", "examples"]),
    package_data={
        "vasomap": ["data/*.json"],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "networkx>=2.5",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.10",
        ],
    },
)

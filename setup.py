from setuptools import setup, find_packages

# Read the contents of README.md for the long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="multicluster_searcher",
    version="0.1.0",
    author="Multi-Cluster Searcher Team",
    author_email="team@multicluster-searcher.example.com",
    description="Ranks scheduler clusters against a client's security, network and locality conditions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/multicluster_searcher",
    packages=find_packages(where=".", include=["multicluster_searcher", "multicluster_searcher.*"]),
    package_dir={"": "."},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=5.1",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "multicluster-searcher=multicluster_searcher.main:main",
        ],
    },
)

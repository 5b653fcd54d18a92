from setuptools import setup, find_packages

setup(
    name="earlReport",
    version="0.1.0",
    description="W3C Evaluation and Report Language (EARL) test report builder",
    author="Your Name",
    author_email="you@example.com",
    packages=find_packages(include=["earlReport", "earlReport.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rdflib>=6.2",
        "PyYAML>=6.0",
        "tabulate>=0.8.9",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    license="MIT",
)

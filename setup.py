from setuptools import setup, find_packages

setup(
    name="chargrid",
    version="0.1.0",
    packages=find_packages(),
    package_data={"chargrid": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)

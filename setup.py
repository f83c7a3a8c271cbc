from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="massformat",
    version="0.0.1",
    author="Peter Cotton",
    author_email="",
    description="Locale-aware mass formatting",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/petercotton/massformat",
    packages=find_packages(include=["massformat", "massformat.*"]),
    include_package_data=True,
    package_data={
        'massformat': ['mass/*.yaml'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "Babel>=2.12.0",
        "Pint>=0.20",
        "PyYAML>=6.0",
        "pandas>=1.3.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)

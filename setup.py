from setuptools import find_packages, setup

classifiers = [
    "Development Status :: 3 - Alpha",
    "License :: OSI Approved :: Apache Software License",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
]

with open("README.md") as f:
    long_description = f.read()

with open("requirements.txt") as f:
    install_requires = [r.strip() for r in f.readlines() if r.strip()]

EXTRAS = ["tests"]
extras_require = {}
for e in EXTRAS:
    with open(f"requirements.{e}.txt") as f:
        extras_require[e] = [r.strip() for r in f.readlines() if r.strip()]


setup(
    name="gtfs_reader",
    version="0.1.0",
    description="Reads, validates and queries GTFS static transit feeds.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache 2",
    platforms="any",
    classifiers=classifiers,
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
)

import re
from os.path import dirname, join, realpath
from setuptools import find_packages, setup


def _read_version():
    init_file = join(dirname(realpath(__file__)), "src", "polyseq", "__init__.py")
    with open(init_file, "r") as f:
        return re.search(r'__version__ = "(.+)"', f.read()).group(1)


setup(
    name="polyseq",
    version=_read_version(),
    description="Analysis of DNA, RNA and protein sequences",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"polyseq.sequence": ["codon_tables.txt"]},
    python_requires=">=3.9",
    install_requires=["numpy >= 1.25"],
    extras_require={"test": ["pytest"]},
)

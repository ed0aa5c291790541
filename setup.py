from setuptools import setup, find_namespace_packages
from pathlib import Path

# Read the requirements from requirements.txt
reqs_path = Path(__file__).parent / "requirements.txt"
requirements = [
    line.strip()
    for line in reqs_path.read_text().splitlines()
    if line.strip() and not line.startswith("#")
]

setup(
    name="rangeset",
    version="0.1.0",
    description="Disjoint range sets over any totally ordered type",
    author="Sir Wabbit",
    python_requires=">=3.12",
    packages=find_namespace_packages(include=["rangeset", "rangeset.*"], exclude=["*.__pycache__"]),
    py_modules=["ranges"],
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
)

"""Set-up file for cubic for installations using ``pip install .``"""
from setuptools import find_packages, setup


with open("requirements.txt") as f:
    required = f.read().splitlines()

with open("requirements-dev.txt") as f:
    required_dev = f.read().splitlines()


setup(
    name="cubic",
    version="1.0.0",
    license="Public Domain",
    keywords=["cubic equation roots cardano closed-form"],
    install_requires=required,
    extras_require={"testing": required_dev},
    description="Closed-form roots of cubic polynomials with real coefficients",
    platforms=["Linux", "Windows", "Mac OS-X"],
    python_requires=">=3.9",
    package_data={
        "cubic": [
            "py.typed",
        ],
    },
    packages=find_packages("src"),
    package_dir={"": "src"},
    entry_points={
        "console_scripts": [
            "cubic = cubic.cli:main",
        ],
    },
    zip_safe=False,
)

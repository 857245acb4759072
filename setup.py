"""
Setup file.
"""

from setuptools import find_packages, setup

KEYWORDS = "cef chromium embedded rust cargo bundle packaging runtime deploy"


if __name__ == "__main__":
    setup(
        name="cefbundle",
        version="0.1.0",
        description="Build CEF examples with cargo and package them with the CEF runtime",
        keywords=KEYWORDS,
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        python_requires=">=3.8",
        install_requires=["tqdm"],
        extras_require={"test": ["pytest"]},
        entry_points={"console_scripts": ["cefbundle=cefbundle.cli:main"]},
        include_package_data=True)

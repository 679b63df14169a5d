from setuptools import find_packages, setup


setup(
    name="git-ignore",
    version="1.4.0",
    description="Quickly and easily add templates to .gitignore",
    author="GAHEOS",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "tomli-w>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        # Installed as `git-ignore` so that `git ignore ...` finds it on PATH.
        "console_scripts": ["git-ignore=git_ignore.cli:main"],
    },
)

from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("mdeck", "./src/mdeck/__init__.py")
mdeck = ModuleType(loader.name)
loader.exec_module(mdeck)

setup(
    name="mdeck",
    version=mdeck.__version__,  # type: ignore
    description="Turn a Markdown document into an HTML slide deck, with live reload.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=["tests"]),
    package_data={"mdeck": ["static/*", "templates/*", "themes/*"]},
    entry_points={"console_scripts": ["mdeck=mdeck.cli:main"]},
    install_requires=[
        "appdirs",
        "cyclopts",
        "fastapi",
        "Jinja2",
        "markdown-it-py",
        "pydantic>=2",
        "Pygments",
        "PyYAML",
        "rich",
        "uvicorn[standard]",
        "watchfiles",
    ],
    extras_require={
        "pdf": ["playwright>=1.48"],
        "test": ["httpx", "playwright>=1.48", "pytest"],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)

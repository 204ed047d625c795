# setup.py
from setuptools import setup, find_packages

setup(
    name="risp",
    version="0.3.0",
    description="A small tree-walking interpreter for an S-expression language",
    packages=find_packages(include=["risp", "risp.*", "risp_lsp", "risp_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "lsp": ["pygls>=1.1,<2", "lsprotocol>=2023.0.0"],
        "test": ["pytest", "hypothesis", "pygls>=1.1,<2", "lsprotocol>=2023.0.0"],
    },
    entry_points={
        "console_scripts": [
            "risp=risp.repl:main",
            "risp-ls=risp_lsp.server:main",
        ],
    },
    zip_safe=False,
)

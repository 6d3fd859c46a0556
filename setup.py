# setup.py
from setuptools import setup, find_packages

setup(
    name="lispreter",
    version="0.1.0",
    description="A small Lisp interpreter with a static language server",
    packages=find_packages(include=["lispreter", "lispreter.*", "lispreter_lsp", "lispreter_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "lispreter=lispreter.cli:main",
            "lispreter-ls=lispreter_lsp.server:main",
        ],
    },
    zip_safe=False,
)

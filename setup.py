#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='bookgraph',
    version='0.1.0',
    description='GraphQL API over an in-memory store of books and authors',
    long_description=read("README.rst"),
    packages=['bookgraph', 'bookgraph.database', 'bookgraph.graph', 'bookgraph.graphql'],
    keywords="graphql books authors",
    install_requires=[
        "flask>=2.2",
        "graphql-core>=3.2,<3.3",
        "pydantic-settings>=2.0",
    ],
    extras_require={
        "test": ["precisely>=0.1.9", "pytest"],
    },
    entry_points={
        "console_scripts": [
            "bookgraph-server=bookgraph.server:main",
        ],
    },
    python_requires=">=3.8",
    license="BSD-2-Clause",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)

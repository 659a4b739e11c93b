#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from pathlib import Path

from setuptools import find_packages, setup

# read the version without importing the package, its dependencies might not be installed yet
version_ns: dict = {}
exec((Path(__file__).parent / 'borsh_codec' / 'version.py').read_text(), version_ns)

install_requires = [
    'pydantic>=2,<3',
    'PyYAML>=6',
    'structlog>=22.3',
    'typing_extensions>=4.6',
]

setup(
    name='borsh-codec',
    version=version_ns['__version__'],
    description='Borsh binary codec driven by Python type annotations',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('tests', 'tests.*')),
    package_data={
        'borsh_codec.conf': ['*.yml'],
    },
    install_requires=install_requires,
    extras_require={
        'tests': ['pytest>=7'],
    },
)

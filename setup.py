#    Copyright 2014 Mirantis, Inc.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

import os
import setuptools


def requirements(name='requirements.txt'):
    dir_path = os.path.dirname(os.path.realpath(__file__))
    requirements = []
    with open('{0}/{1}'.format(dir_path, name), 'r') as reqs:
        requirements = [r.strip() for r in reqs.readlines() if r.strip()]
    return requirements


name = 'privatecloud'
version = '1.0.0'


setuptools.setup(
    name=name,
    version=version,
    description='Privatecloud package',
    long_description="""Privatecloud derives the parameters of OpenStack
    service classes (glance, ceilometer) from a single configuration
    document, validates them and hands the resulting declarations to
    puppet.
    """,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    author='Mirantis Inc.',
    author_email='product@mirantis.com',
    url='http://mirantis.com',
    keywords='privatecloud openstack puppet mirantis',
    packages=setuptools.find_packages(exclude=['*.tests', '*.tests.*']),
    package_data={
        'privatecloud': ['settings.yaml',
                         'fixtures/*.yaml',
                         'fixtures/facts/*.yaml'],
    },
    zip_safe=False,
    python_requires='>=3.6',
    install_requires=requirements(),
    extras_require={'test': requirements('test-requirements.txt')},
    entry_points={
        'console_scripts': [
            'privatecloud = privatecloud.cli:main',
        ]})

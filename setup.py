#!/usr/bin/env python3

import setuptools

setuptools.setup(
    name='fact',
    version='2.0.0',

    description='Exact arbitrary-precision factorials with several classic algorithms',

    # Allow UTF-8 characters in README with encoding argument.
    long_description=open('README.rst', encoding="utf-8").read(),
    long_description_content_type='text/x-rst',
    keywords=['python', 'factorial', 'bignum'],

    author='',
    url='https://github.com/johnthagen/python-blueprint',

    packages=setuptools.find_packages('src'),
    package_dir={'': 'src'},

    # pip 9.0+ will inspect this field when installing to help users install a
    # compatible version of the library for their Python version.
    python_requires='>=3.10',

    # This is a trick to avoid duplicating dependencies between both setup.py and
    # requirements.txt.
    # requirements.txt must be included in MANIFEST.in for this to work.
    install_requires=open('requirements.txt').readlines(),
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
        'dev': [
            'mypy',
            'nox',
            'pytest',
            'pytest-cov',
            'ruff',
        ],
    },
    zip_safe=False,

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
    ],

    entry_points={
        'console_scripts': ['fact=fact.cli:app'],
    }
)

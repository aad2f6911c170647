from setuptools import find_packages, setup


setup(
    name='django-hrid',
    version='0.3.0',
    description='Human readable IDs with checksums for numeric keys, for Django.',

    # Get more strings from http://www.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers",
        "Framework :: Django",
        "Development Status :: 3 - Alpha",
        "Environment :: Web Environment",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: BSD License"
    ],
    keywords='django id ids identifier base32 checksum human readable',
    license='BSD',
    packages=find_packages(exclude=['ez_setup']),
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    install_requires=[
        'Django',
    ],
    extras_require={
        'test': ['pytest'],
    },
)

"""Install this using `pip install [-e '.']`."""

from setuptools import setup, find_packages

VERSION = '0.1'

modname = distname = 'mptcpcheck'
descr = ('Library to detect Multipath TCP support and active MPTCP '
         'connections on Linux end hosts.')


setup(
    name=distname,
    version=VERSION,
    description=descr,
    long_description=descr,
    packages=find_packages(exclude=['tests']),
    classifiers=[
        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
        "Programming Language :: Python",
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "Topic :: System :: Networking",
        'Programming Language :: Python :: 3',
    ],
    keywords='networking multihoming mptcp tcp proc',
    license='GPLv2',
    python_requires='>=3.5',
    install_requires=[],
    extras_require={'test': ['pytest']},
)

# Python version 3.6 and up.
from setuptools import setup, find_packages
from codecs import open
from os import path
import sys


here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

install_reqs = []
if sys.platform != "win32":
    install_reqs += ["netifaces"]
else:
    install_reqs += ["winregistry>=2.0", "wmi"]

setup(
    version='1.0.0',
    name='hostmac',
    description='Finds the MAC address of the primary network interface',
    keywords=('MAC address, hardware address, default interface, netstat, ifconfig, WMI, binding order'),
    long_description_content_type="text/markdown",
    long_description=long_description,
    license='public domain',
    package_dir={"": "."},
    packages=find_packages(exclude=('tests', 'docs')),
    install_requires=install_reqs,
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3'
    ],
)

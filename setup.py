import os
import re
from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'VERSION')) as f:
    __version__ = f.read().strip()
if not re.match(r'^\d+\.\d+\.\d+$', __version__):
    raise RuntimeError('VERSION must be <major>.<minor>.<patch>')

requires = [
    'opentelemetry-api>=1.20.0',
    'opentelemetry-sdk>=1.20.0'
]

setup(
    name='basen',
    version=__version__,
    description="BaseN binary to text encoding in any radix and alphabet",
    include_package_data=True,
    packages=find_packages(
        exclude=['tests']),
    python_requires='>=3.10',
    install_requires=requires,
    extras_require={
        'test': ['pytest']
    },
    )

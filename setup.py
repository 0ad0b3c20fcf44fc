from importlib.machinery import SourceFileLoader
from setuptools import find_packages, setup


version = SourceFileLoader('mallat.version', 'mallat/version.py').load_module()

with open('README.md', 'r') as fdesc:
    long_description = fdesc.read()

setup(
    name='mallat',
    version=version.version,
    description='Periodized discrete wavelet transforms and wavelet-domain filters',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python',
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Image Processing',
        'Programming Language :: Python :: 3',
    ],
    keywords='wavelets, filter banks, signal processing, image processing',
    license='3-clause BSD',
    packages=find_packages(exclude=['tests', 'docs']),
    install_requires=['numpy', 'torch>2.0.0'],
    extras_require={'tests': ['pytest', 'PyWavelets']},
)

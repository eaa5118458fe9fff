"""
setup.py
"""

from setuptools import setup, find_packages

setup(
    name='saml-authn',
    version='1.0.0',
    description='SAML2 AuthnRequest parameters and request building for Service Providers.',
    license='Apache 2.0',
    packages=find_packages('src/'),
    package_dir={'': 'src'},
    install_requires=[
        "pysaml2 >= 6.5.1",
        "PyYAML",
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    entry_points={
        "console_scripts": ["saml-authn-request=saml_authn.scripts.saml_authn_request:construct_authn_request"]
    }
)

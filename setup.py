from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name             = "pyisddecoder",
    version          = "0.1.0",
    author           = "Tim Barnes",
    author_email     = "tdba@bas.ac.uk",
    description      = "Python module to decode NOAA Integrated Surface Database (ISD) records",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    url              = "https://github.com/antarctica/pyisddecoder",
    license          = "Open Government License v3.0",
    packages         = [
        "pyisddecoder",
        "pyisddecoder.isd"
    ],
    extras_require   = {
        "test": ["pytest"]
    },
    classifiers = [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: Other/Proprietary License",
        "Programming Language :: Python :: 3"
    ]
)

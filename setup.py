import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="flacmeta",
    version="1.0.0",
    packages=[
        'flacmeta',
        'flacmeta.formats',
    ],
    description="decode the metadata blocks of FLAC streams",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires='>=3.6',
    install_requires=[
        'construct',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)

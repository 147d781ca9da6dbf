from setuptools import setup, find_packages

setup(
    name="grobnerEngine",
    version="0.1.0",
    author="ilay menahem",
    author_email="ilay.menahem@campus.technion.ac.il",
    description="Groebner basis computation over rational, real, complex and prime fields",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/ilaymenahem/grobnerEngine",
    packages=find_packages(include=["grobnerEngine", "grobnerEngine.*"]),
    install_requires=[
        'tqdm',
        'numpy',
        'sympy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)

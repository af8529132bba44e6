import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="SomLvq",
    version="1.0.0",
    author="SomLvq developers",
    description="Labelled self-organizing maps refined by learning vector quantization",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3"
    ],
    keywords=[
        "Self-Organizing Maps",
        "Kohonen Network",
        "Learning Vector Quantization"
    ],
    python_requires=">=3.8",
    install_requires=["numpy", "scipy", "pandas", "plotly", "matplotlib", "scikit-learn", "tqdm"],
    extras_require={
        "test": ["pytest"]
    }
)

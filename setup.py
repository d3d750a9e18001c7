import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="rootfinder",
    version="0.1.0",
    description="Bisection, false position, Newton-Raphson and secant "
                "root finding with iteration traces.",
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest'],
    },
    keywords='numerical methods root finding bisection secant',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['rootfinder', 'rootfinder.*']),
    python_requires='>=3.9',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)

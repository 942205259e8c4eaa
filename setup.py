import setuptools

setuptools.setup(
    name="mkrename",
    version="1.0.0",
    description="SLEEF symbol renaming and function declaration header generator",
    packages=setuptools.find_packages(),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    python_requires='>=3.5',
)

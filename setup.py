from setuptools import setup, find_packages


setup(
    name='polynomials',
    version='0.1.0',
    author='Ludovic Andrieu',
    author_email='vuvu700.vuvu@gmail.com',
    description='Univariate polynomials over any numeric domain: arithmetic, euclidean division, parsing and rendering',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/vuvu700/polynomials',
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
    install_requires=[
        "numpy",
        "typing_extensions",
    ],
    extras_require={
        "test": ["pytest"],
        "dev": ["pytest", "mypy"],
    },
)

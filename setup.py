from setuptools import setup

setup(
    name='commitlanes',
    version='0.1',
    description='Lane layout for commit graph diagrams',
    author='Iliyas Jorio',
    classifiers=[
        'Topic :: Software Development :: Version Control :: Git',
        'Intended Audience :: Developers',
    ],
    packages=[
        'commitlanes',
        'commitlanes.graph',
        'commitlanes.toolbox',
    ],
    entry_points={
        'console_scripts': ['commitlanes=commitlanes.__main__:main']
    },
    python_requires='>= 3.10',
    install_requires=[],
    extras_require={
        'memory-indicator': ['psutil'],
        'test': ['pytest'],
    },
    tests_require=[
        'pytest',
    ],
)

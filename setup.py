from setuptools import setup

setup(
    name='tagscrub',
    version='0.1.0',
    description='Strip year, format and bitrate annotations from music metadata',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    platforms='ALL',
    packages=['tagscrub', 'tagscrub.utils'],
    python_requires='>=3.10',
    install_requires=[
        'pydantic>=2.0.0',
        'pydantic-settings>=2.0.0',
        'PyYAML',
        'typer',
        'rich',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'tagscrub=tagscrub.cli:main',
        ],
    },
)

from setuptools import find_packages, setup

setup(
    name='covid-timeline',
    version="0.0.1",
    description='JHU CSSE COVID-19 historical timelines by location',
    packages=find_packages(include=['covid_timeline', 'covid_timeline.*']),
    author='Dan Sheldon',
    author_email='sheldon@cs.umass.edu',
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.18',
        'pandas>=1.4',
        'cachetools>=4.1',
        'requests>=2.23',
        'pycountry>=20.7',
        'redis>=3.5'
    ],
    extras_require={
        'test': ['pytest>=6.0']
    },
    keywords='covid jhu time series',
    license='MIT'
)

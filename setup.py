from setuptools import setup, find_packages

setup(
    name='epd_birdy',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'examples']),
    python_requires='>=3.9',
    install_requires=['pandas', 'openpyxl'],
    extras_require={'test': ['pytest']},
    author='Birdy',
    description='Scale EPD impact data to a reference quantity by life-cycle phase',
    license='MIT',
    include_package_data=True,
)

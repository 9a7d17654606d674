import setuptools

setuptools.setup(name='gisdb',
                 packages=setuptools.find_packages(include=['gisdb', 'gisdb.*']),
                 version='0.1.0',
                 description='In-memory geographic index of named cities',
                 long_description='''
# gisdb

Cities (a name and an integer x, y coordinate) indexed twice: by name in a binary search tree
and by coordinate in a 2d tree.  Supports insertion, lookup and deletion by name or coordinate,
and circular range search.

Command files can be run with `gisdb run FILE` (or `gisdb check FILE` to verify the indices
after every command).
                 ''',
                 long_description_content_type='text/markdown',
                 include_package_data=True,
                 python_requires='>=3.7',
                 install_requires=[
                     'colorlog',
                     ],
                 extras_require={
                     'test': ['pytest'],
                 },
                 entry_points={
                     'console_scripts': [
                         'gisdb = gisdb:main',
                     ],
                 },
                 classifiers=(
                     "Programming Language :: Python :: 3.7",
                     "Operating System :: OS Independent",
                     "Development Status :: 4 - Beta",
                 ),
                 )

import os
import re

from setuptools import setup


def get_version():
    module_init = 'udisks2/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    with open(module_init) as version_file:
        return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                         version_file.read()).group(1)


setup(name='udisks2-client',
      version=get_version(),
      description='Asynchronous client for the UDisks2 storage daemon',
      license='LGPL',
      platforms='Linux',
      packages=['udisks2', 'udisks2.interfaces'],
      python_requires='>=3.11',
      install_requires=['colorlog', 'dbus-fast', 'frozendict', 'ruamel.yaml', 'wrapt'],
      extras_require={'test': ['pytest']},
      keywords='udisks udisks2 dbus storage disks',
      include_package_data=True,
      tests_require=['pytest'],
      zip_safe=False,
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: System :: Filesystems'
      ])


from setuptools import setup

setup(
    name =             "scrollpanes",
    version =          "0.0.1",
    author =           "Christoph Landgraf",
    author_email =     "christoph.landgraf@googlemail.com",
    description =      "Horizontally scrolling panes on top of a fixed set of windows",
    license =          "BSD",
    url =              "https://github.com/clandgraf/cui",
    packages =         ['scrollpanes', 'scrollpanes.windows'],
    python_requires =  ">=3.4",
    extras_require =   {'test': ['pytest']},
    entry_points =     {'console_scripts': [
        'scrollpanes-demo = scrollpanes.__main__:main',
    ]}
)

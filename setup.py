#!/usr/bin/env python3
from __future__ import annotations

import re
import setuptools
import pathlib
import sys
import toml

__minver__ = '3.8'
__github__ = 'https://github.com/utf16io/utf16io/'
__gitraw__ = 'https://raw.githubusercontent.com/utf16io/utf16io/'
__author__ = 'utf16io developers'
__slogan__ = 'Read and write UTF-16 on binary streams, in either byte order.'
__topics__ = [
    'Development Status :: 3 - Alpha',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Software Development :: Libraries',
    'Topic :: Text Processing',
]


def get_config():
    here = pathlib.Path(__file__).parent.absolute()
    sys.path.insert(0, str(here))

    import utf16io

    def get_setup_readme(filename: str | pathlib.Path | None = None):
        if filename is None:
            filename = here.joinpath('README.md')
        with open(filename, 'r', encoding='UTF8') as README:
            def complete_link(match):
                link: str = match[1]
                if any(link.lower().endswith(xt) for xt in ('jpg', 'gif', 'png', 'svg')):
                    return F'({__gitraw__}master/{link})'
                else:
                    return F'({__github__}blob/master/{link})'
            readme = README.read()
            return re.sub(R'(?<=\])\((?!\w+://)(.*?)\)', complete_link, readme)

    ppcfg: dict[str, dict] = toml.load(here.joinpath('pyproject.toml'))
    options = ppcfg.get('tool', {}).get('utf16io', {})

    return dict(
        name=utf16io.__distribution__,
        version=utf16io.__version__,
        long_description=get_setup_readme(),
        author=__author__,
        description=__slogan__,
        long_description_content_type='text/markdown',
        url=__github__,
        python_requires=F'>={__minver__}',
        classifiers=__topics__,
        packages=setuptools.find_packages(include=('utf16io*',)),
        install_requires=options.get('requires', []),
        extras_require=options.get('extras', {}),
    )


if __name__ == '__main__':
    setuptools.setup(**get_config())

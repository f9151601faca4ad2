"""File helpers: capped line reading, file sizes and extension checks."""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass
from pathlib import PurePath
from typing import IO, AnyStr

from television.threads import default_num_threads

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CappedRead:
    """Lines read from a stream, possibly cut short by a byte cap.

    ``partial`` is true when reading stopped because more than the allowed
    number of bytes had been read.
    """

    lines: list[str]
    bytes_read: int
    partial: bool


def read_into_lines_capped(reader: IO[AnyStr], max_bytes: int) -> CappedRead:
    """Read lines from ``reader`` until it is exhausted or ``max_bytes`` is passed.

    Trailing whitespace is stripped from each line. Byte streams are decoded
    as UTF-8; invalid data raises ``UnicodeDecodeError``. Read errors
    propagate as ``OSError``.
    """
    lines: list[str] = []
    bytes_read = 0
    while True:
        line = reader.readline()
        if not line:
            break
        if bytes_read > max_bytes:
            break
        if isinstance(line, bytes):
            size = len(line)
            text = line.decode("utf-8")
        else:
            text = line
            size = len(line.encode("utf-8"))
        lines.append(text.rstrip())
        bytes_read += size
    return CappedRead(lines=lines, bytes_read=bytes_read, partial=bytes_read > max_bytes)


@functools.cache
def get_default_num_threads() -> int:
    """The default number of threads, computed once."""
    return default_num_threads()


def get_file_size(path: str | os.PathLike[str]) -> int | None:
    """Size of the file in bytes, or None if it cannot be read."""
    try:
        return os.stat(path).st_size
    except OSError:
        return None


KNOWN_TEXT_FILE_EXTENSIONS: frozenset[str] = frozenset(
    """
    ada adb ads applescript as asc ascii ascx asm asmx asp aspx atom au3 awk
    bas bash bashrc bat bbcolors bcp bdsgroup bdsproj bib bowerrc c cbl cc cfc
    cfg cfm cfml cgi cjs clj cljs cls cmake cmd cnf cob code-snippets coffee
    coffeekup conf cp cpp cpt cpy crt cs csh cson csproj csr css csslintrc csv
    ctl curlrc cxx d dart dfm diff dof dpk dpr dproj dtd eco editorconfig ejs
    el elm emacs eml ent erb erl eslintignore eslintrc ex exs f f03 f77 f90
    f95 fish for fpp frm fs fsproj fsx ftn gemrc gemspec gitattributes
    gitconfig gitignore gitkeep gitmodules go gpp gradle graphql groovy
    groupproj grunit gtmpl gvimrc h haml hbs hgignore hh hpp hrl hs hta
    htaccess htc htm html htpasswd hxx iced iml inc inf info ini ino int irbrc
    itcl itermcolors itk jade java jhtm jhtml js jscsrc jshintignore jshintrc
    json json5 jsonld jsp jspx jsx ksh less lhs lisp log ls lsp lua m m4 mak
    map markdown master md mdown mdwn mdx metadata mht mhtml mjs mk mkd mkdn
    mkdown ml mli mm mxml nfm nfo noon npmignore npmrc nuspec nvmrc ops pas
    pasm patch pbxproj pch pem pg php php3 php4 php5 phpt phtml pir pl pm pmc
    pod pot prettierrc properties props pt pug purs py pyx r rake rb rbw rc
    rdoc rdoc_options resx rexx rhtml rjs rlib ron rs rss rst rtf rvmrc rxml s
    sass scala scm scss seestyle sh shtml sln sls spec sql sqlite sqlproj srt
    ss sss st strings sty styl stylus sub sublime-build sublime-commands
    sublime-completions sublime-keymap sublime-macro sublime-menu
    sublime-project sublime-settings sublime-workspace sv svc svg swift t tcl
    tcsh terminal tex text textile tg tk tmLanguage tmpl tmTheme toml tpl ts
    tsv tsx tt tt2 ttml twig txt v vb vbproj vbs vcproj vcxproj vh vhd vhdl
    vim viminfo vimrc vm vue webapp webmanifest wsc x-php xaml xht xhtml xml
    xs xsd xsl xslt y yaml yml zsh zshrc
    """.split()
)

KNOWN_IMAGE_FILE_EXTENSIONS: frozenset[str] = frozenset(
    {
        "bmp", "ff", "gif", "hdr", "ico", "jpeg", "jpg", "exr", "png",
        "pnm", "qoi", "tga", "tif", "webp",
    }
)


def _extension(path: str | os.PathLike[str]) -> str:
    return PurePath(path).suffix[1:]


def is_known_text_extension(path: str | os.PathLike[str]) -> bool:
    """Whether the path's extension is a known text-file extension."""
    return _extension(path) in KNOWN_TEXT_FILE_EXTENSIONS


def is_accepted_image_extension(path: str | os.PathLike[str]) -> bool:
    """Whether the path's extension is a supported image extension."""
    return _extension(path) in KNOWN_IMAGE_FILE_EXTENSIONS
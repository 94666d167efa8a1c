"""Text of the files written into a new package."""

from __future__ import annotations

import re
from typing import Any, Mapping

__all__ = [
    "DESCRIPTION_TEMPLATE",
    "GITIGNORE_LINES",
    "GPL3_LICENSE_MD_TEMPLATE",
    "MIT_LICENSE_MD_TEMPLATE",
    "MIT_LICENSE_TEMPLATE",
    "NAMESPACE_TEMPLATE",
    "PKGDOWN_TEMPLATE",
    "RBUILDIGNORE_LINES",
    "README_TEMPLATE",
    "RPROJ_TEMPLATE",
    "TemplateRenderingError",
    "render",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when a placeholder has no value in the context."""


def render(template: str, context: Mapping[str, Any]) -> str:
    """Replace every ``{{ key }}`` in ``template`` with ``context[key]``."""

    def substitute(match: re.Match[str]) -> str:
        key = match.group("key")
        if key not in context:
            raise TemplateRenderingError(f"missing value for '{key}'")
        return str(context[key])

    return _PLACEHOLDER_PATTERN.sub(substitute, template)


DESCRIPTION_TEMPLATE = """Package: {{ package_name }}
Title: What the Package Does (One Line, Title Case)
Version: 0.0.0.9000
Authors@R: 
    person("First", "Last", , "first.last@example.com", role = c("aut", "cre"))
Description: What the package does (one paragraph).
License: `use_mit_license()`, `use_gpl3_license()` or friends to pick a
    license
Encoding: UTF-8
Roxygen: list(markdown = TRUE)
RoxygenNote: 7.3.2
"""

NAMESPACE_TEMPLATE = """# Generated by roxygen2: do not edit by hand

"""

RBUILDIGNORE_LINES = ("^.*\\.Rproj$", "^\\.Rproj\\.user$")

GITIGNORE_LINES = (".Rproj.user", ".Rhistory", ".RData", ".Ruserdata")

RPROJ_TEMPLATE = """Version: 1.0

RestoreWorkspace: No
SaveWorkspace: No
AlwaysSaveHistory: Default

EnableCodeIndexing: Yes
Encoding: UTF-8

AutoAppendNewline: Yes
StripTrailingWhitespace: Yes
LineEndingConversion: Posix

BuildType: Package
PackageUseDevtools: Yes
PackageInstallArgs: --no-multiarch --with-keep.source
PackageRoxygenize: rd,collate,namespace
"""

README_TEMPLATE = """# {{ package_name }}

<!-- badges: start -->
<!-- badges: end -->

The goal of {{ package_name }} is to ...

## Installation

You can install the development version of {{ package_name }} like so:

``` r
# FILL THIS IN! HOW CAN PEOPLE INSTALL YOUR DEV PACKAGE?
```
"""

MIT_LICENSE_TEMPLATE = """YEAR: {{ year }}
COPYRIGHT HOLDER: {{ holder }}
"""

MIT_LICENSE_MD_TEMPLATE = """# MIT License

Copyright (c) {{ year }} {{ holder }}

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

GPL3_LICENSE_MD_TEMPLATE = """GNU General Public License
==========================

_Version 3, 29 June 2007_
_Copyright (c) {{ year }} {{ holder }}_

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

This program is distributed in the hope that it will be useful, but WITHOUT ANY
WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A
PARTICULAR PURPOSE. See the GNU General Public License for more details.

The full license text is available at <https://www.gnu.org/licenses/gpl-3.0.txt>.
"""

PKGDOWN_TEMPLATE = """url: ~
template:
  bootstrap: 5
"""

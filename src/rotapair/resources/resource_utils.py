# Rota Pair
# Copyright (C) 2025  Rota Pair developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
# rotapair/resources/resource_utils.py

from importlib_resources import files

RESOURCE_PACKAGE = "rotapair.resources"


def read_resource_text(resource_name: str, encoding: str = "utf-8") -> str:
    """
    Read a text resource file.

    Parameters
    ----------
    resource_name : str
        Name of the resource file
    encoding : str, optional
        Text encoding, by default "utf-8"

    Returns
    -------
    str
        Content of the resource file as string

    Raises
    ------
    FileNotFoundError
        If the resource file is not found in the package
    """
    resource = files(RESOURCE_PACKAGE).joinpath(resource_name)
    if not resource.is_file():
        raise FileNotFoundError(
            f"Resource '{resource_name}' not found in package '{RESOURCE_PACKAGE}'"
        )
    return resource.read_text(encoding=encoding)


def get_style_sheet() -> str:
    """
    Get the QSS stylesheet content.

    Returns
    -------
    str
        Content of the styles.qss file
    """
    return read_resource_text("styles.qss")


#  LocalWords:  importlib

from enum import Enum


class DirectoryCategory(Enum):
    Thing = 1
    Binding = 2
    Configuration = 3
    Unrecognized = 4


# Directory convention of a binding's description tree
ESH_INF_DIRECTORY = "ESH-INF"
THING_DIRECTORY = "thing"
BINDING_DIRECTORY = "binding"
CONFIGURATION_DIRECTORY = "config"

XML_EXTENSION = "xml"

MESSAGE_EMPTY_FILE = "The file {name} should not be empty."

DIRECTORY_CATEGORIES = {
    THING_DIRECTORY: DirectoryCategory.Thing,
    BINDING_DIRECTORY: DirectoryCategory.Binding,
    CONFIGURATION_DIRECTORY: DirectoryCategory.Configuration,
}

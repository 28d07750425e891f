"""
Well-known property names for jlinerc.

These are the keys consulted in the system property namespace and the
name of the default configuration file.
"""

# Points at a file or URL holding the configuration properties to load
JLINE_CONFIGURATION = "jline.configuration"

# Default configuration file, resolved against the user's home directory
JLINE_RC = ".jline.rc"

# Host properties
USER_HOME = "user.home"
OS_NAME = "os.name"
INPUT_ENCODING = "input.encoding"

# Environment variable, usually in the form en_US.UTF-8
LC_CTYPE = "LC_CTYPE"

# Properties files are Latin-1 unless escaped
PROPERTIES_ENCODING = "iso-8859-1"

# Boolean property turning on debug output from jlinerc's loggers
LOG_DEBUG = "jline.log.debug"

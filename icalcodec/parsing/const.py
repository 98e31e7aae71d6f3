"""Constants for ical parsing library."""

# Related to rfc5545 text parsing
FOLD_LEN = 75
FOLD_INDENT = " "
MIN_FOLD_LEN = 5
WSP = [" ", "\t"]
CRLF = "\r\n"
LF = "\n"
ATTR_BEGIN = "BEGIN"
ATTR_END = "END"
ATTR_VALUE = "VALUE"
VCALENDAR = "VCALENDAR"

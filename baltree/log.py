import sys

LOG_FATAL = -2
LOG_ERROR = -1
LOG_WARN = 0
LOG_INFO = 1
LOG_DEBUG1 = 2
LOG_DEBUG2 = 3
LOG_DEBUG3 = 4

def warn(*msg):
    logger.do_log(LOG_WARN, "warning: ", *msg)

def error(*msg):
    logger.do_log(LOG_ERROR, "error: ", *msg)

def info(*msg):
    logger.do_log(LOG_INFO, *msg)

def debug1(*msg):
    logger.do_log(LOG_DEBUG1, *msg)

def debug2(*msg):
    logger.do_log(LOG_DEBUG2, *msg)

def debug3(*msg):
    logger.do_log(LOG_DEBUG3, *msg)


class ColorScheme(object):
    """ANSI escape sequences per log level. Levels without an entry, and
    every level of a disabled scheme, are written uncolored."""

    RESET = '\033[0m'
    LEVELS = {
            LOG_FATAL : '\033[1;31m',
            LOG_ERROR : '\033[1;31m',
            LOG_WARN  : '\033[1;33m',
            LOG_DEBUG1: '\033[36m',
            LOG_DEBUG2: '\033[36m',
            LOG_DEBUG3: '\033[1;36m',
        }

    def __init__(self, enabled):
        self.enabled = enabled

    def wrap_list(self, level, l):
        color = self.LEVELS.get(level)
        if not self.enabled or color is None:
            return l
        return [color] + l + [self.RESET]


class Logger(object):
    def __init__(self, loglevel=LOG_WARN, logfile=None, colors='auto'):
        self.loglevel = loglevel
        self._file = logfile if logfile is not None else sys.stderr
        self.set_colors(colors)

    def set_colors(self, preference):
        if preference == 'always':
            enabled = True
        elif preference == 'auto':
            enabled = self._file.isatty()
        elif preference == 'never':
            enabled = False
        else:
            raise ValueError
        self.colors = ColorScheme(enabled)

    def enabled(self, level):
        return self.loglevel >= level or level <= LOG_FATAL

    def do_log(self, level, *msg):
        if not self.enabled(level):
            return
        parts = self.colors.wrap_list(level, list(map(str, msg)))
        parts.append("\n")
        self._file.write(''.join(parts))


logger = Logger()

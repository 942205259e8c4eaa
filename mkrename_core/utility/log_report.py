# -*- coding: utf-8 -*-

###############################################################################
# This file is part of mkrename
###############################################################################
# MIT License
#
# Copyright (c) 2018 Kalray
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
###############################################################################
# created:          Oct 19th, 2026
#
# description: log reporting for mkrename (diagnostics are never mixed
#              with the generated C text, which goes to the output stream)
###############################################################################


import sys


class Log(object):
    """ log report class """
    ## stream receiving log messages, sys.stderr (resolved when the
    #  message is reported) if None
    log_stream     = None

    class LogLevel(object):
        """ log level builder """
        def __init__(self, level_name, sub_level=None):
            self.name = level_name
            self.sub_level = sub_level

    class LogLevelFilter(LogLevel):
        """ filtering log message """
        def match(self, tested_level):
            if tested_level.name != self.name:
                return False
            elif self.sub_level is None or self.sub_level == tested_level.sub_level:
                return True
            else:
                return False

    # log levels definition
    Warning = LogLevelFilter("Warning")
    Info    = LogLevelFilter("Info")
    Error   = LogLevelFilter("Error")
    Debug   = LogLevelFilter("Debug")
    Verbose = LogLevelFilter("Verbose")

    # list of enabled log levels
    enabled_levels = [
        Error,
    ]

    @staticmethod
    def filter_log_level(filter_list, log_level):
        """ Test if log_level matches one of the filters listed in
            filter_list """
        for log_filter in filter_list:
            if log_filter.match(log_level):
                return True
        return False

    @staticmethod
    def is_level_enabled(level):
        return Log.filter_log_level(Log.enabled_levels, level)

    @staticmethod
    def get_log_stream():
        return sys.stderr if Log.log_stream is None else Log.log_stream

    @staticmethod
    def report(level, msg, *args, **kw):
        """ report log message, a Log.Error message also interrupts
            the current processing by raising error (or a generic
            Exception if error is None) """
        error = kw.pop("error", None)
        formatted_msg = msg.format(*args, **kw)
        if Log.is_level_enabled(level):
            Log.get_log_stream().write(formatted_msg + "\n")
        if level is Log.Error:
            raise error or Exception(formatted_msg)

    ## enable display of the specific log level
    #  @param level log-level to be enabled (name string)
    @staticmethod
    def enable_level(level, sub_level=None):
        Log.enabled_levels.append(Log.LogLevelFilter(level, sub_level))

    ## disable display of every filter matching level
    @staticmethod
    def disable_level(level):
        Log.enabled_levels = [
            log_filter for log_filter in Log.enabled_levels
            if log_filter.name != level
        ]

    @staticmethod
    def set_log_stream(log_stream):
        Log.log_stream = log_stream

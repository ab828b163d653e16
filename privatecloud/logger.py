# -*- coding: utf-8 -*-

#    Copyright 2014 Mirantis, Inc.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

import logging
import sys

from logging.handlers import WatchedFileHandler


DATEFORMAT = '%Y-%m-%d %H:%M:%S'
LOGFORMAT = '%(asctime)s.%(msecs)03d %(levelname)s ' + \
            '[%(thread)x] (%(module)s) %(message)s'
formatter = logging.Formatter(LOGFORMAT, DATEFORMAT)


logger = logging.getLogger("privatecloud")
logger.addHandler(logging.NullHandler())


def setup_logging(settings, debug=False):
    """Attach handlers to the privatecloud logger

    Logs go to stderr, so that stdout stays reserved for derived output,
    and additionally to LOG_FILE when it is configured.

    :param settings: a settings object with APP_LOGLEVEL and LOG_FILE
    :param debug: force DEBUG level regardless of settings
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    level = 'DEBUG' if debug else (settings.APP_LOGLEVEL or 'INFO')
    logger.setLevel(getattr(logging, level.upper()))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if settings.LOG_FILE:
        log_file = WatchedFileHandler(settings.LOG_FILE)
        log_file.setFormatter(formatter)
        logger.addHandler(log_file)

    return logger

# coding: utf-8

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

from privatecloud.errors.base import BackendException
from privatecloud.errors.base import ProfileException
from privatecloud.errors.base import ValidationException


class InvalidData(ValidationException):
    message = "Invalid data received"


class MissingKeyError(ValidationException):
    message = "Required parameter is missing"

    def __init__(self, key, **kwargs):
        self.key = key
        super(MissingKeyError, self).__init__(
            "Required parameter '{0}' is missing".format(key), **kwargs)


class ParameterTypeError(ValidationException):
    message = "Parameter has unexpected type"

    def __init__(self, key, expected, actual, **kwargs):
        self.key = key
        self.expected = expected
        self.actual = actual
        super(ParameterTypeError, self).__init__(
            "Parameter '{0}' should be of type '{1}', got '{2}'".format(
                key, expected, actual),
            **kwargs)


class UnknownProfile(ProfileException):
    message = "Unknown profile"


class UnknownPlatform(ProfileException):
    message = "Unknown platform"


class ApplyError(BackendException):
    message = "Failed to apply declarations"

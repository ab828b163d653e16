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
"""Privatecloud cmd interface
Exit Codes:
ended successfully - 0
invalid configuration - 2
apply failed - 3
"""

import argparse
import sys
import textwrap

from oslo_serialization import jsonutils
import yaml

from privatecloud.backends import manifest
from privatecloud.backends import puppet
from privatecloud import consts
from privatecloud import declarations
from privatecloud import engine
from privatecloud.errors import errors
from privatecloud import logger
from privatecloud import platform
from privatecloud import rules
from privatecloud.settings import settings
from privatecloud import utils


class CmdApi(object):

    def __init__(self, config=settings):
        self.parser = argparse.ArgumentParser(
            description=textwrap.dedent(__doc__),
            formatter_class=argparse.RawDescriptionHelpFormatter)
        self.subparser = self.parser.add_subparsers(
            title='actions',
            description='Supported actions',
            help='Provide of one valid actions')
        self.config = config
        self.register_options()
        self.register_actions()

    def register_options(self):
        self.parser.add_argument(
            '--config', '-c', dest='config', default=None,
            help='Path to configuration file')
        self.parser.add_argument(
            '--debug', '-d', dest='debug', action='store_true', default=False)

    def register_actions(self):
        profile_arg = [(('profile',), {'type': str})]
        source_args = profile_arg + [
            (('--params', '-p'), {'dest': 'params', 'required': True,
                                  'help': 'Yaml file with parameters'}),
            (('--platform',), {'dest': 'platform', 'default': None,
                               'choices': list(consts.PLATFORMS)}),
            (('--facts',), {'dest': 'facts', 'default': None,
                            'help': 'Yaml file with node facts'}),
        ]
        self.register_parser('list')
        self.register_parser('conf')
        self.register_parser('show', profile_arg)
        self.register_parser('derive', source_args + [
            (('--format', '-f'), {'dest': 'format',
                                  'default': consts.OUTPUT_FORMATS.yaml,
                                  'choices': list(consts.OUTPUT_FORMATS)}),
            (('--show-secrets',), {'dest': 'show_secrets',
                                   'action': 'store_true',
                                   'default': False}),
        ])
        self.register_parser('apply', source_args + [
            (('--noop',), {'dest': 'noop', 'action': 'store_true',
                           'default': False}),
            (('--manifest',), {'dest': 'manifest', 'default': 'site.pp',
                               'help': 'Manifest file name'}),
        ])

    def register_parser(self, func_name, arguments=()):
        parser = self.subparser.add_parser(func_name)
        parser.set_defaults(func=getattr(self, func_name))
        for args, kwargs in arguments:
            parser.add_argument(*args, **kwargs)

    def parse(self, args):
        parsed = self.parser.parse_args(args)
        if parsed.config:
            self.config.update_from_file(parsed.config)
        logger.setup_logging(self.config, debug=parsed.debug)
        if not hasattr(parsed, 'func'):
            self.parser.print_help()
            return consts.EXIT_CODES.invalid
        try:
            return parsed.func(parsed) or consts.EXIT_CODES.success
        except (errors.ValidationException, errors.ProfileException) as exc:
            logger.logger.error(exc.message)
            return consts.EXIT_CODES.invalid
        except errors.ApplyError as exc:
            logger.logger.error(exc.message)
            return consts.EXIT_CODES.apply_failed

    def _platform(self, args):
        if args.facts:
            return platform.resolve_from_facts(utils.load_yaml_file(args.facts))
        return platform.resolve_platform(args.platform)

    def _derive(self, args):
        params = utils.load_yaml_file(args.params)
        return engine.derive(args.profile, params, self._platform(args))

    def list(self, args):
        for profile in rules.PROFILES.values():
            print("{0:40} | {1:39}".format(profile.name, profile.description))

    def show(self, args):
        profile = rules.get_profile(args.profile)
        data = {
            'name': profile.name,
            'includes': [p.name for p in profile.includes],
            'parameters': [
                dict(name=p.name, type=p.type, required=p.required,
                     default=p.default, description=p.description)
                for p in profile.schema],
            'fields': [
                dict(target=target, attribute=attribute,
                     sources=list(sources), transform=transform)
                for target, attribute, sources, transform
                in engine.trace(profile)],
        }
        print(yaml.safe_dump(data, default_flow_style=False))

    def derive(self, args):
        result = self._derive(args)
        mask_secrets = bool(self.config.MASK_SECRETS) and \
            not args.show_secrets
        if args.format == consts.OUTPUT_FORMATS.manifest:
            backend = manifest.ManifestBackend(mask_secrets=mask_secrets)
            engine.apply(result, backend)
            print(backend.manifest)
        elif args.format == consts.OUTPUT_FORMATS.json:
            print(jsonutils.dumps(
                [d.to_dict(mask_secrets) for d in result],
                indent=2, sort_keys=True))
        else:
            print(declarations.dump(result, mask_secrets))

    def apply(self, args):
        result = self._derive(args)
        backend = puppet.PuppetApplyBackend(
            self.config, manifest_name=args.manifest, noop=args.noop)
        engine.apply(result, backend)
        print(backend.stdout)

    def conf(self, args):
        print(self.config.dump())


def main():
    api = CmdApi()
    exit_code = api.parse(sys.argv[1:])
    sys.exit(exit_code)

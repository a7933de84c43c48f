"""Expand and variables command implementations."""

import logging
from argparse import Namespace
from typing import Dict, Any

from uri_templates.exceptions import (
    TemplateSyntaxError,
    TemplateCanNotBeExpanded,
    VariablesValidationError,
)
from uri_templates.loader import VariablesLoader, parse_assignments
from uri_templates.template import UriTemplate
from uri_templates.variables import VariableBag


logger = logging.getLogger(__name__)


def configure_logging(args: Namespace) -> None:
    """Set up logging from --log-level, --debug and --quiet."""
    log_level = getattr(logging, args.log_level.upper())
    if getattr(args, 'debug', False):
        log_level = logging.DEBUG
    elif getattr(args, 'quiet', False):
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_variables(args: Namespace) -> VariableBag:
    """
    Collect variables from --vars-file, --var and --list.

    Command line values override values from the file.
    """
    bag = VariableBag()
    if args.vars_file:
        bag = VariablesLoader().load(args.vars_file)

    overrides: Dict[str, Any] = dict(parse_assignments(args.var))
    for name, value in parse_assignments(args.list).items():
        overrides[name] = value.split(',') if value else []

    return bag.replace(overrides)


def expand_template(args: Namespace) -> int:
    """
    Expand a template and print the result.

    Returns:
        0 on success, 1 on missing files or bad arguments,
        2 on syntax, validation or expansion errors
    """
    configure_logging(args)

    try:
        template = UriTemplate.parse(args.template)
        variables = build_variables(args)

        if args.strict:
            result = template.expand_strict(variables)
        else:
            result = template.expand(variables)

        print(result)
        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except VariablesValidationError as e:
        for error in e.errors:
            logger.error(f"Validation error: {error.message} ({error.path})" if error.path
                         else f"Validation error: {error.message}")
        return e.exit_code
    except TemplateSyntaxError as e:
        logger.error(f"Syntax error: {e}")
        return 2
    except TemplateCanNotBeExpanded as e:
        logger.error(f"Expansion error: {e}")
        return 2
    except ValueError as e:
        logger.error(f"Invalid argument: {e}")
        return 1


def list_variables(args: Namespace) -> int:
    """Print the variable names a template references, one per line."""
    configure_logging(args)

    try:
        template = UriTemplate.parse(args.template)
    except TemplateSyntaxError as e:
        logger.error(f"Syntax error: {e}")
        return 2

    for name in template.variable_names:
        print(name)
    return 0

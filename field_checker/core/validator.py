"""
Field Validator

The single entry point of the package. ``Validator.check`` runs the
required/empty guard, then hands the value to the rule registered for the
requested kind. Unknown kinds are not errors: they simply never validate.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from ..config.options import CheckOptions
from ..config.pydantic_config import ValidatorSettings
from ..validators.base import Kind, Outcome, Rule
from ..validators.contact import EmailRule, MobileRule, PhoneRule
from ..validators.files import (
    FileSizeRule,
    FileSystem,
    FileTypeRule,
    LocalFileSystem,
)
from ..validators.numeric import (
    BooleanRule,
    FloatRule,
    IntegerRule,
    MultipleOfRule,
    NumericRule,
    RangeRule,
)
from ..validators.primitives import (
    AlphabeticRule,
    AlphanumericRule,
    PatternRule,
    TextRule,
)
from ..validators.security import CreditCardRule, PasswordRule
from ..validators.temporal import DateRule, TimeRule
from ..validators.url import URLRule

OptionsLike = Union[CheckOptions, Mapping[str, Any], None]


def build_rule_table(
    settings: ValidatorSettings, filesystem: FileSystem
) -> Dict[Kind, Rule]:
    """
    Create the rule for every kind.

    Args:
        settings: Validator-wide defaults (date and time formats)
        filesystem: Filesystem used by the file_size kind

    Returns:
        Mapping from every Kind to its rule

    Raises:
        RuntimeError: If a kind has no rule
    """
    rules = [
        EmailRule(),
        PhoneRule(),
        MobileRule(),
        TextRule(),
        URLRule(),
        DateRule(settings.date_format),
        TimeRule(settings.time_format),
        AlphanumericRule(),
        AlphabeticRule(),
        NumericRule(),
        BooleanRule(),
        IntegerRule(),
        FloatRule(),
        RangeRule(),
        PatternRule(),
        PasswordRule(),
        FileTypeRule(),
        FileSizeRule(filesystem),
        CreditCardRule(),
        MultipleOfRule(),
    ]
    table = {rule.kind: rule for rule in rules}

    missing = set(Kind) - set(table)
    if missing:
        raise RuntimeError(
            f"No rule for kinds: {sorted(kind.value for kind in missing)}"
        )

    return table


def is_empty(value: Any) -> bool:
    """Empty under Python truthiness: None, "", 0, 0.0, False, empty containers"""
    try:
        return not value
    except (TypeError, ValueError):
        # Objects without a defined truth value (e.g. arrays) count as present
        return False


class Validator:
    """Checks single values against a kind and per-call options"""

    def __init__(
        self,
        settings: Optional[ValidatorSettings] = None,
        filesystem: Optional[FileSystem] = None,
    ):
        """
        Initialize validator

        Args:
            settings: Validator-wide defaults; ValidatorSettings() if omitted
            filesystem: Filesystem for the file_size kind; the local one if omitted
        """
        self.settings = settings or ValidatorSettings()
        self.filesystem = filesystem or LocalFileSystem()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._rules = build_rule_table(self.settings, self.filesystem)

    def rule_for(self, kind: Union[Kind, str]) -> Optional[Rule]:
        """Return the rule behind ``kind``, or None for an unknown kind."""
        resolved = Kind.lookup(kind)
        if resolved is None:
            return None
        return self._rules[resolved]

    def _check_required(self, value: Any, options: CheckOptions) -> Optional[Outcome]:
        """
        Short-circuit empty values of optional fields.

        Returns:
            The final Outcome for an empty, optional value; None when the
            kind's rule must run
        """
        if is_empty(value) and not options.required:
            return Outcome(valid=False, required=False)
        return None

    def check(
        self, value: Any, kind: Union[Kind, str], options: OptionsLike = None
    ) -> Outcome:
        """
        Check ``value`` against ``kind``.

        Args:
            value: Raw caller-supplied value
            kind: A Kind or its string name
            options: CheckOptions, a mapping of option names, or None

        Returns:
            Outcome with the verdict and, when valid, the derived fields.
            ``required=False`` means the value was empty and optional.

        Raises:
            InvalidOptionError: If the options are malformed
            FileAccessError: If the filesystem refuses a file_size lookup
        """
        check_options = CheckOptions.from_mapping(options)

        skipped = self._check_required(value, check_options)
        if skipped is not None:
            self.logger.debug(f"Skipped empty optional value for kind {kind!r}")
            return skipped

        outcome = Outcome(valid=False, required=True)

        rule = self.rule_for(kind)
        if rule is None:
            self.logger.debug(f"Unknown kind {kind!r}; value not validated")
            return outcome

        rule.evaluate(value, check_options, outcome)
        self.logger.debug(f"Checked {rule.kind.value}: valid={outcome.valid}")
        return outcome


_default_validator: Optional[Validator] = None


def get_default_validator() -> Validator:
    """Return the shared default Validator, creating it on first use."""
    global _default_validator
    if _default_validator is None:
        _default_validator = Validator()
    return _default_validator


def check(value: Any, kind: Union[Kind, str], options: OptionsLike = None) -> Outcome:
    """
    Check ``value`` against ``kind`` with the default Validator.

    >>> check("a@b.com", "email").to_dict()
    {'valid': True, 'required': True, 'username': 'a', 'domain': 'b.com', 'length': 7}
    """
    return get_default_validator().check(value, kind, options)

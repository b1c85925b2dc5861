from pwshort.core.resolver import AliasResolver, shortest_alias, unique_prefix
from pwshort.core.types import ParameterInfo
from pwshort.registry import CommandRegistry


def test_shortest_alias_prefers_fewest_characters() -> None:
    assert shortest_alias(["gci", "ls", "dir"]) == "ls"
    assert shortest_alias([]) is None


def test_shortest_alias_ties_go_to_first_declared() -> None:
    assert shortest_alias(["bb", "aa"]) == "bb"
    assert shortest_alias(["aa", "bb"]) == "aa"


def test_command_resolves_to_shortest_alias(registry: CommandRegistry) -> None:
    command = AliasResolver(registry).resolve_command_alias("Get-ChildItem")
    assert command.canonical_name == "Get-ChildItem"
    assert command.short_form == "ls"


def test_command_tie_break_is_stable(registry: CommandRegistry) -> None:
    resolver = AliasResolver(registry)
    picks = {resolver.resolve_command_alias("Test-Tie").short_form for _ in range(10)}
    assert picks == {"ab"}


def test_command_written_as_alias_resolves(registry: CommandRegistry) -> None:
    command = AliasResolver(registry).resolve_command_alias("gci")
    assert command.name == "gci"
    assert command.canonical_name == "Get-ChildItem"
    assert command.short_form == "ls"


def test_already_shortest_command_has_no_short_form(registry: CommandRegistry) -> None:
    command = AliasResolver(registry).resolve_command_alias("ls")
    assert command.known
    assert command.short_form is None


def test_get_prefix_is_stripped_without_aliases(registry: CommandRegistry) -> None:
    command = AliasResolver(registry).resolve_command_alias("get-date")
    assert command.canonical_name == "Get-Date"
    assert command.short_form == "Date"


def test_command_without_alias_or_prefix_keeps_its_name(registry: CommandRegistry) -> None:
    command = AliasResolver(registry).resolve_command_alias("Write-Host")
    assert command.known
    assert command.short_form is None


def test_custom_implied_verb_prefix(registry: CommandRegistry) -> None:
    resolver = AliasResolver(registry, implied_verb_prefix="Write-")
    assert resolver.resolve_command_alias("Write-Host").short_form == "Host"
    assert resolver.resolve_command_alias("Get-Date").short_form is None


def test_unknown_command_is_not_found(registry: CommandRegistry) -> None:
    command = AliasResolver(registry).resolve_command_alias("Invoke-Nothing")
    assert not command.known
    assert command.canonical_name is None
    assert command.short_form is None


def test_parameter_resolves_case_insensitively(registry: CommandRegistry) -> None:
    parameter = AliasResolver(registry).resolve_parameter_alias("Get-ChildItem", "recurse")
    assert parameter.canonical_name == "Recurse"
    assert parameter.token == "recurse"
    assert parameter.alias == "s"


def test_parameter_typed_as_alias_resolves_to_shortest(registry: CommandRegistry) -> None:
    parameter = AliasResolver(registry).resolve_parameter_alias("Get-ChildItem", "PSPath")
    assert parameter.canonical_name == "LiteralPath"
    assert parameter.alias == "LP"


def test_parameter_already_shortest_is_a_no_op(registry: CommandRegistry) -> None:
    resolver = AliasResolver(registry)
    assert resolver.resolve_parameter_alias("Get-ChildItem", "LP").alias is None
    assert resolver.resolve_parameter_alias("Get-ChildItem", "s").alias is None
    assert resolver.resolve_parameter_alias("Get-ChildItem", "s").known


def test_parameter_tie_break_is_stable(registry: CommandRegistry) -> None:
    resolver = AliasResolver(registry)
    picks = {resolver.resolve_parameter_alias("Test-Tie", "Mode").alias for _ in range(10)}
    assert picks == {"mx"}


def test_unknown_parameter_is_left_as_typed(registry: CommandRegistry) -> None:
    parameter = AliasResolver(registry).resolve_parameter_alias("Get-ChildItem", "Bogus")
    assert not parameter.known
    assert parameter.canonical_name == "Bogus"
    assert parameter.alias is None


def test_prefix_of_parameter_is_not_matched(registry: CommandRegistry) -> None:
    assert not AliasResolver(registry).resolve_parameter_alias("Get-ChildItem", "Rec").known


def test_common_parameters_apply_to_every_command(registry: CommandRegistry) -> None:
    parameter = AliasResolver(registry).resolve_parameter_alias("Get-Date", "ErrorAction")
    assert parameter.alias == "ea"


def test_parameter_of_unknown_command(registry: CommandRegistry) -> None:
    assert not AliasResolver(registry).resolve_parameter_alias("Invoke-Nothing", "Path").known


def test_resolve_parameters_keeps_first_use_per_canonical_name(registry: CommandRegistry) -> None:
    resolved = AliasResolver(registry).resolve_parameters("Get-ChildItem", ["Recurse", "Path", "s"])
    assert list(resolved) == ["Recurse", "Path"]
    assert resolved["Recurse"].token == "Recurse"
    assert resolved["Path"].alias is None


def test_abbreviation_uses_shortest_unambiguous_prefix(registry: CommandRegistry) -> None:
    resolver = AliasResolver(registry, abbreviate_parameters=True)
    assert resolver.resolve_parameter_alias("Get-ChildItem", "Filter").alias == "Fi"
    assert resolver.resolve_parameter_alias("Get-ChildItem", "Force").alias == "Fo"
    assert resolver.resolve_parameter_alias("Get-ChildItem", "Path").alias == "Pa"


def test_unique_prefix_gives_up_when_name_is_a_prefix_of_another() -> None:
    path = ParameterInfo(name="Path")
    assert unique_prefix(path, [path, ParameterInfo(name="PathType")]) is None

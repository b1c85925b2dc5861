from pwshort.core.rewriter import replace_token, rewrite_invocation
from pwshort.core.types import ResolvedCommand, ResolvedParameter


def test_replace_token_swaps_first_whole_token() -> None:
    assert replace_token("Get-ChildItem -Path x", "Get-ChildItem", "ls") == "ls -Path x"


def test_replace_token_ignores_longer_words() -> None:
    assert replace_token("Get-ChildItems Get-ChildItem", "Get-ChildItem", "ls") == "Get-ChildItems ls"


def test_replace_token_skips_string_literals() -> None:
    assert replace_token("Write-Host '-Object' -Object x", "-Object", "-o") == "Write-Host '-Object' -o x"


def test_replace_token_skips_script_blocks() -> None:
    assert replace_token("% { gci -Recurse } -Recurse", "-Recurse", "-s") == "% { gci -Recurse } -s"


def test_replace_token_keeps_colon_value() -> None:
    assert replace_token("gci -Depth:2", "-Depth", "-d") == "gci -d:2"


def test_replace_token_without_match_returns_input() -> None:
    assert replace_token("gci -Force", "-Recurse", "-s") == "gci -Force"


def test_rewrite_invocation_applies_command_then_parameters() -> None:
    command = ResolvedCommand(name="Get-ChildItem", canonical_name="Get-ChildItem", short_form="ls")
    parameters = {
        "Recurse": ResolvedParameter(canonical_name="Recurse", token="Recurse", alias="s"),
        "LiteralPath": ResolvedParameter(canonical_name="LiteralPath", token="LiteralPath", alias="LP"),
        "Force": ResolvedParameter(canonical_name="Force", token="Force"),
    }
    fragment = "Get-ChildItem -Recurse -LiteralPath C:\\tmp -Force"
    assert rewrite_invocation(fragment, command, parameters) == "ls -s -LP C:\\tmp -Force"


def test_rewrite_invocation_without_short_form_keeps_command() -> None:
    command = ResolvedCommand(name="Write-Host", canonical_name="Write-Host")
    parameters = {"Object": ResolvedParameter(canonical_name="Object", token="Object", alias="o")}
    assert rewrite_invocation("Write-Host -Object 'Write-Host'", command, parameters) == "Write-Host -o 'Write-Host'"


def test_rewrite_parameter_value_that_matches_name_is_untouched() -> None:
    command = ResolvedCommand(name="Select-Object", canonical_name="Select-Object", short_form="select")
    parameters = {"First": ResolvedParameter(canonical_name="First", token="First", alias="f")}
    fragment = "Select-Object -First 1 -ExpandProperty First"
    assert rewrite_invocation(fragment, command, parameters) == "select -f 1 -ExpandProperty First"

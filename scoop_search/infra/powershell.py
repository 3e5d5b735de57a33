def build_posh_hook(executable: str = "scoop-search") -> str:
    """Builds a PowerShell hook that routes `scoop search` to this tool.

    Every other `scoop` subcommand is passed through to `scoop.ps1`. Meant to be
    evaluated from a PowerShell profile:

        Invoke-Expression (&scoop-search --hook)

    Args:
        executable: Command name or path used to invoke this tool.

    Returns:
        A single-line PowerShell function definition.
    """
    return (
        "function scoop { "
        f'if ($args[0] -eq "search") {{ {executable} @($args | Select-Object -Skip 1) }} '
        "else { scoop.ps1 @args } "
        "}"
    )

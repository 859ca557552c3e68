"""
Library modules shared by all of utf16io: the 16-bit word primitive in `utf16io.lib.structures`,
the exception types in `utf16io.lib.exceptions`, and configuration and logging in
`utf16io.lib.environment`.
"""

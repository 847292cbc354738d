import jinja2


jinja_env = jinja2.Environment(
    block_start_string="{$",
    block_end_string="$}",
    variable_start_string="{{",
    variable_end_string="}}",
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
)


# One "#define" per registered key, followed by the opaque global block.
DEFINE_BLOCK_TEMPLATE = (
    "{$ for key, value in defines $}#define {{ key }} {{ value }}\n{$ endfor $}"
    "{{ global_block }}"
)

define_block_template = jinja_env.from_string(DEFINE_BLOCK_TEMPLATE)


def render_define_block(defines, global_block):
    """Render the ``#define`` lines for the given (key, value) pairs, followed by the global block."""
    try:
        return define_block_template.render(
            defines=list(defines), global_block=global_block
        )
    except jinja2.UndefinedError as err:
        raise ValueError(f"Cannot compose define block: {err.args[0]}") from None

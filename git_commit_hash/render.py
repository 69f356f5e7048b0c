from contextlib import contextmanager

CLASS_COMMENT = [
    '/// <summary>',
    '/// Stores the git commit hash of the current HEAD of your local repository.',
    '/// </summary>',
]

PROPERTY_COMMENT = [
    '/// <summary>',
    '/// Gets the git commit hash.',
    '/// </summary>',
]


class SourceBuilder:
    """Accumulates lines of C# source, indenting each by the current depth."""

    def __init__(self, indenting, indent_size, line_ending):
        self.indent_unit = indenting.value * indent_size
        self.line_ending = line_ending.value
        self.depth = 0
        self.parts = []

    def add_line(self, line):
        self.parts.append(self.indent_unit * self.depth + line + self.line_ending)

    def add_blank_line(self):
        self.parts.append(self.line_ending)

    @contextmanager
    def block(self, header):
        self.add_line(header)
        self.add_line('{')
        self.depth += 1
        yield
        self.depth -= 1
        self.add_line('}')

    def text(self):
        return ''.join(self.parts)


@contextmanager
def optional_namespace(builder, namespace):
    if namespace is None:
        yield
    else:
        with builder.block(f'namespace {namespace}'):
            yield


def render(options, commit_hash):
    builder = SourceBuilder(options.indenting, options.indent_size, options.line_ending)
    builder.add_line('using System;')
    builder.add_blank_line()

    with optional_namespace(builder, options.namespace):
        for comment in CLASS_COMMENT:
            builder.add_line(comment)
        with builder.block(f'{options.access_modifier.value} static class {options.class_name}'):
            for comment in PROPERTY_COMMENT:
                builder.add_line(comment)
            with builder.block('public static string Value'):
                builder.add_line(f'get {{ return "{commit_hash}"; }}')

    return builder.text()

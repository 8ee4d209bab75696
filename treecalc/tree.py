class Leaf:
    def __init__(self, start, end):
        self.start = start
        self.end = end

    @property
    def span(self):
        return self.start, self.end

    def text(self, source):
        return source[self.start:self.end]

    def __eq__(self, other):
        return isinstance(other, Leaf) and self.span == other.span

    def __repr__(self):
        return f"Leaf({self.start}, {self.end})"


class Node:
    def __init__(self, label, children):
        self.label = label
        self.children = children

    @property
    def span(self):
        # from the start of the first leaf to the end of the last one
        return self.children[0].span[0], self.children[-1].span[1]

    def text(self, source):
        start, end = self.span
        return source[start:end]

    def __eq__(self, other):
        return (isinstance(other, Node)
                and self.label == other.label
                and self.children == other.children)

    def __repr__(self):
        return f"Node('{self.label}', {self.children})"


def format_tree(tree, source, indent=0):
    pad = '  ' * indent

    if isinstance(tree, Leaf):
        return f"{pad}'{tree.text(source)}'"

    lines = [f"{pad}{tree.label}"]
    for child in tree.children:
        lines.append(format_tree(child, source, indent + 1))

    return '\n'.join(lines)

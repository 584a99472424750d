"""No space left on device: directory sizes from a terminal session."""

MAX_DIR_SIZE = 100000
TOTAL_SPACE = 70000000
REQUIRED_SPACE = 30000000


class Directory:
    """A directory with subdirectories and file sizes."""

    def __init__(self, parent=None):
        self.parent = parent
        self.dirs = {}
        self.files = {}
        self._size = None

    def size(self):
        """Total size of everything below this directory."""
        if self._size is None:
            self._size = sum(d.size() for d in self.dirs.values()) + sum(self.files.values())
        return self._size

    def walk(self):
        """Yield every directory, children before their parent."""
        for child in self.dirs.values():
            yield from child.walk()
        yield self


def parse_tree(lines):
    """Build the directory tree from terminal output lines."""
    root = Directory()
    cwd = root
    for line in lines:
        if not line:
            continue
        match line.split(" "):
            case ["$", "cd", "/"]:
                cwd = root
            case ["$", "cd", ".."]:
                if cwd.parent is not None:
                    cwd = cwd.parent
            case ["$", "cd", name]:
                cwd = cwd.dirs[name]
            case ["$", *_]:
                pass
            case ["dir", name]:
                cwd.dirs[name] = Directory(cwd)
            case [size, name]:
                cwd.files[name] = int(size)
            case _:
                raise ValueError(f"unexpected line: {line!r}")
    return root


def small_dirs_total(text, limit=MAX_DIR_SIZE):
    """Sum of sizes of directories no larger than `limit`."""
    root = parse_tree(text.split("\n"))
    return sum(size for size in (d.size() for d in root.walk()) if size <= limit)


def smallest_to_delete(text, total_space=TOTAL_SPACE, required_space=REQUIRED_SPACE):
    """Size of the smallest directory whose removal frees enough space, or 0."""
    root = parse_tree(text.split("\n"))
    lack = required_space - (total_space - root.size())
    return min((d.size() for d in root.walk() if d.size() >= lack), default=0)
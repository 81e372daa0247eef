"""
Unit tests for path resolution and normalization.

Both profiles run on every host; the working directory is passed explicitly.
"""

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from apppath.core.profiles import POSIX, WINDOWS, get_profile, parse_root
from apppath.core.resolver import is_absolute, normalize, posix_resolve, resolve


POSIX_CWD = "/home/user/project"
WINDOWS_CWD = "C:\\Users\\user\\project"


class TestPosixResolve:
    """Tests for resolve with the POSIX profile."""

    def resolve(self, *paths, cwd=POSIX_CWD):
        return resolve(*paths, profile=POSIX, cwd=cwd)

    def test_cannot_climb_above_root(self):
        assert self.resolve("/a/b", "../../../x") == "/x"

    def test_relative_fragment(self):
        assert self.resolve("/foo/bar", "./baz") == "/foo/bar/baz"

    def test_absolute_fragment_wins(self):
        """Fragments left of an absolute one are ignored."""
        assert self.resolve("/foo/bar", "/tmp/file/") == "/tmp/file"
        assert self.resolve("/ignored", "/a", "b") == "/a/b"

    def test_uses_working_directory(self):
        assert self.resolve("wwwroot", "static_files/png/", "../gif/image.gif") == \
            "/home/user/project/wwwroot/static_files/gif/image.gif"
        assert self.resolve("") == POSIX_CWD
        assert self.resolve() == POSIX_CWD

    def test_empty_fragments_skipped(self):
        assert self.resolve("/a", "", "b", "") == "/a/b"

    def test_nothing_resolved(self):
        assert self.resolve(cwd="") == "."
        assert self.resolve("", cwd="") == "."

    def test_relative_working_directory(self):
        """A relative base stays relative and may climb above itself."""
        assert self.resolve("a", cwd="rel") == "rel/a"
        assert self.resolve("../..", cwd="rel") == ".."

    def test_backslash_is_ordinary(self):
        assert self.resolve("/a\\b") == "/a\\b"

    def test_root(self):
        assert self.resolve("/") == "/"
        assert self.resolve("/a", "..") == "/"
        assert self.resolve("//a//b//") == "/a/b"

    def test_posix_resolve_helper(self):
        assert posix_resolve("/res", "x.json") == "/res/x.json"
        assert posix_resolve("/a/b", "..") == "/a"


class TestWindowsResolve:
    """Tests for resolve with the Windows profile."""

    def resolve(self, *paths, cwd=WINDOWS_CWD, environ=None):
        return resolve(*paths, profile=WINDOWS, cwd=cwd, environ=environ or {})

    def test_other_device_skipped(self):
        assert self.resolve("c:/blah\\blah", "d:/games", "c:../a") == "c:\\blah\\a"

    def test_device_taken_from_left(self):
        assert self.resolve("c:/ignore", "d:\\a/b\\c/d", "\\e.exe") == "d:\\e.exe"

    def test_absolute_with_device_wins(self):
        assert self.resolve("c:/ignore", "c:/some/file") == "c:\\some\\file"

    def test_drive_relative_fragment(self):
        assert self.resolve("d:/ignore", "d:some/dir//") == "d:\\ignore\\some\\dir"

    def test_trailing_dot_segments(self):
        assert self.resolve("C:\\foo\\tmp.3\\", "..\\tmp.3\\cycles\\root.js") == \
            "C:\\foo\\tmp.3\\cycles\\root.js"

    def test_unc_share(self):
        assert self.resolve("//server/share", "..", "relative\\") == \
            "\\\\server\\share\\relative"
        assert self.resolve("c:/", "//server/share") == "\\\\server\\share\\"

    def test_double_separator_without_share(self):
        assert self.resolve("c:/", "//") == "c:\\"
        assert self.resolve("c:/", "//dir") == "c:\\dir"
        assert self.resolve("c:/", "///some//dir") == "c:\\some\\dir"

    def test_uses_working_directory(self):
        assert self.resolve("foo") == "C:\\Users\\user\\project\\foo"
        assert self.resolve("\\foo") == "C:\\foo"

    def test_device_compared_case_insensitively(self):
        # the device is spelled as first seen, right to left
        assert self.resolve("C:\\a", "c:b") == "c:\\a\\b"

    def test_drive_directory_from_environment(self):
        """A drive-relative path uses that drive's last known directory."""
        environ = {"=d:": "D:\\work"}
        assert self.resolve("d:foo", environ=environ) == "d:\\work\\foo"

    def test_drive_directory_falls_back_to_root(self):
        """Without a directory for the drive, its root is used."""
        assert self.resolve("d:foo") == "d:\\foo"

    def test_drive_directory_same_drive_as_cwd(self):
        assert self.resolve("c:foo") == "c:\\Users\\user\\project\\foo"

    def test_nothing_resolved(self):
        assert self.resolve(cwd="") == "."

    def test_posix_like_working_directory(self):
        """A working directory without a drive still yields an absolute path."""
        assert self.resolve("foo", cwd="/root/dir") == "\\root\\dir\\foo"


class TestPosixNormalize:
    """Tests for normalize with the POSIX profile."""

    @pytest.mark.parametrize("path,expected", [
        ("a/./b/../c", "a/c"),
        ("", "."),
        (".", "."),
        ("./", "./"),
        ("/", "/"),
        ("//", "/"),
        ("//a//b/", "/a/b/"),
        ("/foo/bar//baz/asdf/quux/..", "/foo/bar/baz/asdf"),
        ("/../a", "/a"),
        ("../x/..", ".."),
        ("fixtures///b/../b/c.js", "fixtures/b/c.js"),
        ("bar/foo../../", "bar/"),
        ("../foo../../../bar", "../../bar"),
    ])
    def test_normalize(self, path, expected):
        assert normalize(path, POSIX) == expected


class TestWindowsNormalize:
    """Tests for normalize with the Windows profile."""

    @pytest.mark.parametrize("path,expected", [
        ("a\\.\\b\\..\\c", "a\\c"),
        ("", "."),
        ("/", "\\"),
        ("./fixtures///b/../b/c.js", "fixtures\\b\\c.js"),
        ("/foo/../../../bar", "\\bar"),
        ("a//b//../b", "a\\b"),
        ("a//b//./c", "a\\b\\c"),
        ("//server/share/dir/file.ext", "\\\\server\\share\\dir\\file.ext"),
        ("/a/b/c/../../../x/y/z", "\\x\\y\\z"),
        ("C:", "C:."),
        ("C:..\\abc", "C:..\\abc"),
        ("c:/ignore", "c:\\ignore"),
        ("C:\\", "C:\\"),
        ("\\\\server\\share", "\\\\server\\share\\"),
        ("\\\\server\\share\\", "\\\\server\\share\\"),
        ("//server", "\\server"),
        ("file:stream", "file:stream"),
        ("bar\\foo..\\..\\", "bar\\"),
        ("..\\foo..\\..\\..\\bar", "..\\..\\bar"),
    ])
    def test_normalize(self, path, expected):
        assert normalize(path, WINDOWS) == expected


class TestProperties:
    """Algebraic properties that hold for every input."""

    SAMPLES = [
        "", ".", "..", "/", "//", "a", "a/", "/a/b/../c", "a/./b/../c",
        "../../x", "C:", "C:\\", "C:..\\x", "c:/a//b/", "\\\\server\\share",
        "//server/share/x/..", "a\\b/c", "/..", "...", "a/.../..",
    ]

    @pytest.mark.parametrize("profile", [POSIX, WINDOWS], ids=["posix", "windows"])
    def test_normalize_is_idempotent(self, profile):
        for path in self.SAMPLES:
            once = normalize(path, profile)
            assert normalize(once, profile) == once, path

    def test_resolve_of_absolute_equals_normalize(self):
        for path in ["/a/b/../c", "/x//y", "/", "/a/./b"]:
            assert resolve(path, "", profile=POSIX, cwd=POSIX_CWD) == normalize(path, POSIX)
        for path in ["C:\\a\\..\\b", "c:/x//y", "\\\\srv\\share\\a"]:
            assert resolve(path, "", profile=WINDOWS, cwd=WINDOWS_CWD) == \
                normalize(path, WINDOWS)


class TestRootParsing:
    """Tests for root detection."""

    def test_is_absolute(self):
        assert is_absolute("/a", POSIX)
        assert not is_absolute("a", POSIX)
        assert not is_absolute("C:\\a", POSIX)
        assert is_absolute("C:\\a", WINDOWS)
        assert is_absolute("\\a", WINDOWS)
        assert is_absolute("//server/share", WINDOWS)
        assert not is_absolute("C:a", WINDOWS)
        assert not is_absolute("", WINDOWS)

    def test_unc_root(self):
        root = parse_root("\\\\server\\share\\dir", WINDOWS)
        assert root.device == "\\\\server\\share"
        assert root.end == len("\\\\server\\share")
        assert root.is_unc

    def test_drive_root(self):
        root = parse_root("c:/dir", WINDOWS)
        assert root.device == "c:"
        assert root.end == 3
        assert root.is_absolute

    def test_get_profile(self):
        assert get_profile("posix") is POSIX
        assert get_profile("Windows") is WINDOWS
        with pytest.raises(ValueError):
            get_profile("beos")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

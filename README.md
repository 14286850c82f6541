# zigo

Download and manage Zig compilers from the command line.

zigo reads the official Zig download index and picks the archive for your machine, for
example `x86_64-linux` or `aarch64-macos`. It checks the archive against its SHA-256
checksum and unpacks it into its own directory. A `current` symlink points at the
version you chose as the default.

## Installation

```
pip install .
```

## Usage

```
zigo <version>          Download the specified version of zig compiler and set it as default
zigo fetch <version>    Download the specified version of zig compiler
zigo use <version>      Set the specific installed version as default
zigo ls, list           List installed compiler versions
zigo rm <version> [-f]  Remove the specified compiler, -f means force
zigo clean              Clean up unused dev version compilers
zigo help, -h           Print help message
```

Running `zigo` with no arguments prints the help message.

`<version>` is either a release number such as `0.11.0` or `master` for the latest
development build. zigo records which build `master` resolved to, for example
`0.12.0-dev.1127+32bc07767`.

### Examples

```
zigo 0.11.0         # install 0.11.0 and make it the default
zigo fetch master   # download the latest dev build without switching
zigo use master     # switch to the installed master build
zigo ls             # show installed versions; the default is marked with *
zigo rm 0.11.0 -f   # remove a version even if it is in use (--force works too)
zigo clean          # remove dev builds that are neither current nor master
```

Versions are listed in ascending order. The comparison uses up to four numeric parts and
ignores the `-dev` marker and the `+hash` suffix.

You cannot remove the version you are using, or the one `master` points to, unless you
pass `-f` or `--force`. When a command fails, zigo prints an `ERRO:` line and exits with
status 1.

## Where things live

- Compilers go in `~/.zig`. Set the `ZIGO_PATH` environment variable to use another
  directory.
- Each version is unpacked into its own subdirectory, without the archive's top-level
  folder. `current` is a symlink to the default version.
- The file `config` in that directory holds the current version on its first line and
  the build `master` points to on its second line.
- Downloaded archives are cached in a `zigo` folder inside your user cache directory.
  That is `$XDG_CACHE_HOME` or `~/.cache` on Linux, `~/Library/Caches` on macOS and
  `%LOCALAPPDATA%` on Windows. zigo reuses a cached archive if it matches the checksum
  in the index. If it does not match, zigo downloads the archive again.
- zigo can unpack both `.zip` and tar archives, including compressed ones.

## Using it from Python

The command is `zigo.cli:main(argv=None)`, which returns the exit status. The pieces
behind it can also be used on their own:

- `zigo.versions`: `version_key`, `cmp_version` and `sort_versions` order version
  strings.
- `zigo.config`: `load_config(path)` returns a `Config` with `current` and `master`.
  `Config.save()` writes them back. `current_dist_info()` and `cache_dir()` describe the
  local machine. Errors are raised as `ZigoError`.
- `zigo.fetch`: `get_index`, `select_tarball`, `fetch` and `extract`.
- `zigo.manager`: `Manager(config, dist, cache_dir)` offers `installed_versions`,
  `list_lines`, `use`, `install`, `remove` and `clean`.

## What it does not do

zigo does not change your `PATH`. Add `<zigo path>/current` to it yourself to use the
default compiler. Creating the `current` symlink on Windows may need developer mode or
administrator rights.
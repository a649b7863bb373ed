"""Package records, target parsing and repository/AUR target splitting."""

from __future__ import annotations

import enum
import re
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

_DEP_NAME = re.compile(r"[^<>=:\s]*")


def _dep_name(dep: str) -> str:
    """Strip version constraints and descriptions from a dependency string."""
    match = _DEP_NAME.match(dep.strip())
    return match.group(0) if match else ""


class InstallReason(enum.Enum):
    """Why a package is installed."""

    EXPLICIT = "explicit"
    DEPEND = "depend"


@dataclass(frozen=True)
class Package:
    """An installed package and its dependency metadata."""

    name: str
    reason: InstallReason = InstallReason.EXPLICIT
    base: str | None = None
    provides: tuple[str, ...] = ()
    depends: tuple[str, ...] = ()
    optdepends: tuple[str, ...] = ()
    makedepends: tuple[str, ...] = ()
    checkdepends: tuple[str, ...] = ()


@dataclass(frozen=True)
class Target:
    """A package target, optionally qualified with a repository."""

    repo: str | None
    pkg: str

    @classmethod
    def parse(cls, text: str) -> Target:
        """Parse ``repo/pkg`` or ``pkg``."""
        repo, sep, pkg = text.partition("/")
        if sep:
            return cls(repo, pkg)
        return cls(None, text)

    def __str__(self) -> str:
        return self.pkg if self.repo is None else f"{self.repo}/{self.pkg}"


class Mode(enum.Flag):
    """Which package sources an operation may use."""

    REPO = enum.auto()
    AUR = enum.auto()
    PKGBUILD = enum.auto()


def pkg_base_or_name(pkg: Package) -> str:
    """The package base if it has one, else the package name."""
    return pkg.base if pkg.base is not None else pkg.name


def split_repo_aur_info(
    targets: Iterable[Target | str],
    mode: Mode,
    sync_pkg_names: Iterable[str],
    aur_namespace: str,
) -> tuple[list[Target], list[Target]]:
    """Split targets into those for the sync repositories and those for the AUR."""
    sync = set(sync_pkg_names)
    local: list[Target] = []
    aur: list[Target] = []

    for item in targets:
        targ = item if isinstance(item, Target) else Target.parse(item)
        if Mode.REPO not in mode:
            aur.append(targ)
        elif Mode.AUR not in mode and Mode.PKGBUILD not in mode:
            local.append(targ)
        elif targ.repo is not None:
            if targ.repo in (aur_namespace, "."):
                aur.append(targ)
            else:
                local.append(targ)
        elif targ.pkg in sync:
            local.append(targ)
        else:
            aur.append(targ)

    return local, aur


def unneeded_pkgs(
    local_pkgs: Iterable[Package],
    sync_pkg_names: Iterable[str],
    keep_make: bool,
    keep_optional: bool,
) -> list[str]:
    """Names of installed packages that no explicit package needs, in input order."""
    pkgs = list(local_pkgs)
    by_name = {pkg.name: pkg for pkg in pkgs}
    sync = set(sync_pkg_names)

    providers: defaultdict[str, list[str]] = defaultdict(list)
    for pkg in pkgs:
        providers[pkg.name].append(pkg.name)
        for provided in pkg.provides:
            providers[_dep_name(provided)].append(pkg.name)

    kept: set[str] = set()
    pending = [pkg.name for pkg in pkgs if pkg.reason is InstallReason.EXPLICIT]

    while pending:
        name = pending.pop()
        if name in kept:
            continue
        kept.add(name)
        pkg = by_name[name]

        deps = list(pkg.depends)
        if keep_optional:
            deps.extend(pkg.optdepends)
        if not keep_make and pkg.name not in sync:
            deps.extend(pkg.makedepends)
            deps.extend(pkg.checkdepends)

        for dep in deps:
            pending.extend(p for p in providers.get(_dep_name(dep), ()) if p not in kept)

    return [pkg.name for pkg in pkgs if pkg.name not in kept]
"""Command: install the application (and its domain) into the Mule runtime."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from click.core import ParameterSource
from pydantic import TypeAdapter, ValidationError

from muleappctl.commands._base import MuleCommand
from muleappctl.domain.coordinates import ResolvedDependency, parse_dependency_spec

if TYPE_CHECKING:
    from muleappctl.commands._context import AppContext

_MANIFEST = TypeAdapter(list[ResolvedDependency])


def _parse_dependencies(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> list[ResolvedDependency]:
    deps: list[ResolvedDependency] = []
    for value in values:
        try:
            deps.append(parse_dependency_spec(value))
        except ValueError as exc:
            raise click.BadParameter(str(exc)) from exc
    return deps


def load_dependency_manifest(path: Path) -> list[ResolvedDependency]:
    """Read resolved dependencies from a JSON list.

    Each entry has ``groupId``/``group_id``, ``artifactId``/``artifact_id``,
    ``version`` and ``file``.  Relative ``file`` paths are resolved against
    the manifest's directory.
    """
    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
        deps = _MANIFEST.validate_python(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        msg = f"Invalid dependencies file {path}: {exc}"
        raise click.BadParameter(msg, param_hint="--dependencies-file") from exc

    resolved: list[ResolvedDependency] = []
    for dep in deps:
        if not dep.file.is_absolute():
            dep = dep.model_copy(update={"file": path.parent / dep.file})
        resolved.append(dep)
    return resolved


@click.command(
    cls=MuleCommand,
    examples="""\
  MULE_HOME=/opt/mule muleappctl install --archive target/myapp.zip --copy-to-apps
  muleappctl install --archive target/myapp.zip --final-name myapp --copy-to-apps \\
      --install-domain --domain-dependency org.acme:mydomain:1.0 \\
      --dependency org.acme:mydomain:1.0=/repo/mydomain-1.0.zip
  muleappctl --json install --archive target/myapp.zip --copy-to-apps \\
      --install-domain --domain-dependency org.acme:mydomain:1.0 \\
      --dependencies-file target/dependencies.json""",
)
@click.option(
    "--archive",
    required=True,
    type=click.Path(path_type=Path),
    help="Built application archive.",
)
@click.option("--final-name", default=None, help="Name in apps/ (default: archive name).")
@click.option(
    "--copy-to-apps/--no-copy-to-apps",
    "copy_to_apps",
    default=False,
    help="Publish the archive to $MULE_HOME/apps.",
)
@click.option(
    "--install-domain/--no-install-domain",
    default=False,
    help="Copy the domain dependency to $MULE_HOME/domains first.",
)
@click.option(
    "--domain-dependency",
    default=None,
    help="Domain coordinates as groupId:artifactId:version.",
)
@click.option(
    "--dependency",
    "dependencies",
    multiple=True,
    callback=_parse_dependencies,
    help="Resolved dependency as groupId:artifactId:version=PATH (repeatable).",
)
@click.option(
    "--dependencies-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="JSON list of resolved dependencies.",
)
@click.pass_context
def install(
    ctx: click.Context,
    archive: Path,
    final_name: str | None,
    copy_to_apps: bool,
    install_domain: bool,
    domain_dependency: str | None,
    dependencies: list[ResolvedDependency],
    dependencies_file: Path | None,
) -> None:
    """Install the application archive into the Mule runtime home.

    Flags left unset fall back to the [install] section of muleappctl.toml.
    """
    from muleappctl.domain.request import InstallRequest
    from muleappctl.services.install import InstallService

    app: AppContext = ctx.obj
    defaults = app.settings.install

    def given(name: str) -> bool:
        return ctx.get_parameter_source(name) is not ParameterSource.DEFAULT

    resolved = list(dependencies)
    if dependencies_file is not None:
        resolved.extend(load_dependency_manifest(dependencies_file))

    request = InstallRequest(
        archive=archive,
        final_name=final_name or defaults.final_name,
        copy_to_apps_directory=(
            copy_to_apps if given("copy_to_apps") else defaults.copy_to_apps_directory
        ),
        install_domain=install_domain if given("install_domain") else defaults.install_domain,
        domain_dependency=domain_dependency or defaults.domain_dependency,
        dependencies=tuple(resolved),
    )
    app.emit(InstallService(app.settings).install(request))

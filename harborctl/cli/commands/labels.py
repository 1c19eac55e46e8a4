"""
Label Commands.

One command per label endpoint. Each binds its flags to a parameter schema
and hands it to the dispatcher.
"""

from typing import Optional

import typer
from pydantic import BaseModel, ValidationError

from harborctl.cli.dispatch import dispatch
from harborctl.cli.endpoints import LABEL_ENDPOINTS
from harborctl.cli.schemas.labels import (
    LabelCreate,
    LabelIdParams,
    LabelsListParams,
    LabelUpdate,
)


def _build(schema_cls: type[BaseModel], **values) -> BaseModel:
    """Validate flags into a schema. Failures are usage errors (exit code 2)."""
    try:
        return schema_cls(**values)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            problems.append(f"{field}: {error['msg']}" if field else error["msg"])
        raise typer.BadParameter("; ".join(problems)) from e


def labels_list(
    scope: str = typer.Option(
        ..., "--scope", "-s",
        help="(REQUIRED) The label scope. 'g' for global labels and 'p' for project labels.",
    ),
    name: str = typer.Option("", "--name", "-n", help="The label name as filter."),
    project_id: int = typer.Option(
        0, "--project_id", "-i", help="Relevant project ID. Required when scope is 'p'.",
    ),
    page: int = typer.Option(1, "--page", "-p", help="The page number."),
    page_size: int = typer.Option(
        10, "--page_size", "-z", help="The size of per page, maximum is 100.",
    ),
) -> None:
    """
    List labels according to the query strings.

    Lets the user list labels by name, scope and project_id.

    Examples:
        cli.py labels_list -s g
        cli.py labels_list -s p -i 3 -p 2 -z 5
    """
    params = _build(
        LabelsListParams,
        scope=scope,
        name=name,
        project_id=project_id,
        page=page,
        page_size=page_size,
    )
    dispatch(LABEL_ENDPOINTS["list"], params)


def label_create(
    label_id: int = typer.Option(
        0, "--id", "-i", help="The ID of label. If not set, generated by the registry.",
    ),
    name: str = typer.Option(..., "--name", "-n", help="(REQUIRED) The name of label."),
    description: str = typer.Option(
        ..., "--description", "-d", help="(REQUIRED) The description of label.",
    ),
    color: str = typer.Option(
        "#000000", "--color", "-c", help="The color code of label, e.g. #A9B6BE.",
    ),
    scope: str = typer.Option(
        "g", "--scope", "-s", help="'g' for global labels and 'p' for project labels.",
    ),
    project_id: int = typer.Option(
        0, "--project_id", "-p", help="The project ID when scope is 'p'.",
    ),
    creation_time: Optional[str] = typer.Option(
        None, "--creation_time", help="The creation time of label. Defaults to now.",
    ),
    update_time: Optional[str] = typer.Option(
        None, "--update_time", help="The update time of label. Defaults to now.",
    ),
    deleted: bool = typer.Option(False, "--deleted", help="The label is deleted or not."),
) -> None:
    """
    Create a label.

    Examples:
        cli.py label_create -n release -d "Release images"
        cli.py label_create -n qa -d "QA passed" -c "#A9B6BE" -s p -p 3
    """
    params = _build(
        LabelCreate,
        id=label_id,
        name=name,
        description=description,
        color=color,
        scope=scope,
        project_id=project_id,
        creation_time=creation_time,
        update_time=update_time,
        deleted=deleted,
    )
    dispatch(LABEL_ENDPOINTS["create"], params)


def label_del_by_id(
    label_id: int = typer.Option(..., "--id", "-i", help="(REQUIRED) Label ID."),
) -> None:
    """Delete the label specified by ID."""
    dispatch(LABEL_ENDPOINTS["delete"], _build(LabelIdParams, id=label_id))


def label_get_by_id(
    label_id: int = typer.Option(..., "--id", "-i", help="(REQUIRED) Label ID."),
) -> None:
    """Get the label specified by ID."""
    dispatch(LABEL_ENDPOINTS["get"], _build(LabelIdParams, id=label_id))


def label_update(
    label_id: int = typer.Option(..., "--id", "-i", help="(REQUIRED) Label ID."),
    name: str = typer.Option(..., "--name", "-n", help="(REQUIRED) The name of label."),
    description: str = typer.Option(
        ..., "--description", "-d", help="(REQUIRED) The description of label.",
    ),
    color: str = typer.Option(
        "#000000", "--color", "-c", help="The color code of label, e.g. #A9B6BE.",
    ),
    scope: str = typer.Option(
        "g", "--scope", "-s", help="'g' for global labels and 'p' for project labels.",
    ),
    project_id: int = typer.Option(
        0, "--project_id", "-p", help="The project ID when scope is 'p'.",
    ),
    deleted: bool = typer.Option(False, "--deleted", help="The label is deleted or not."),
) -> None:
    """
    Update the label properties.

    Examples:
        cli.py label_update -i 100 -n release -d "Release images" -c "#FF0000"
    """
    params = _build(
        LabelUpdate,
        id=label_id,
        name=name,
        description=description,
        color=color,
        scope=scope,
        project_id=project_id,
        deleted=deleted,
    )
    dispatch(LABEL_ENDPOINTS["update"], params)


COMMANDS = {
    "labels_list": labels_list,
    "label_create": label_create,
    "label_del_by_id": label_del_by_id,
    "label_get_by_id": label_get_by_id,
    "label_update": label_update,
}


def register(app: typer.Typer) -> None:
    """Add the label commands to the top level of an app."""
    for name, command in COMMANDS.items():
        app.command(name)(command)

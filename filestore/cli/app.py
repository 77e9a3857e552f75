import questionary
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from filestore.errors import FileStoreError
from filestore.intake import IntakeReader
from filestore.services.provisioning_service import ProvisioningService
from filestore.services.transfer_service import TransferService
from filestore.settings import settings
from filestore.storage.factory import get_storage_backends

console = Console()

PUT_CHOICE = "Put file from intake"
GET_CHOICE = "Get stored file"
EXIT_CHOICE = "Exit"
BACK_CHOICE = "Back"


def _build_service() -> TransferService:
    service = TransferService(IntakeReader(settings.intake_dir), get_storage_backends(), ProvisioningService())
    service.provisioning.provision_at_startup(service.backends.values())
    return service


def _select_target(service: TransferService) -> str | None:
    choices = [target.value for target in service.backends] + [BACK_CHOICE]
    choice = questionary.select("Backend", choices=choices).ask()
    if choice is None or choice == BACK_CHOICE:
        return None
    return choice


def put_menu(service: TransferService) -> None:
    target = _select_target(service)
    if target is None:
        return

    names = service.intake.list_names()
    if names:
        name = questionary.select("Intake file", choices=names + [BACK_CHOICE]).ask()
    else:
        console.print(f"[yellow]No files found in {settings.intake_dir}[/yellow]")
        name = questionary.text("File name:").ask()
    if not name or name == BACK_CHOICE:
        return

    try:
        result = service.put(target, name.encode("utf-8"))
    except FileStoreError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return
    console.print(f"[green]{escape(result.message)}[/green]")


def get_menu(service: TransferService) -> None:
    target = _select_target(service)
    if target is None:
        return

    name = questionary.text("File name:").ask()
    if not name:
        return

    try:
        stored = service.get(target, name.strip())
    except FileStoreError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return
    console.print(Panel(Text(stored.content), title=escape(f"{stored.target.value}: {stored.name}")))


def main_menu() -> None:
    service = _build_service()

    console.print()
    console.print("[bold]File Store[/bold]", style="cyan")
    console.print()

    while True:
        choice = questionary.select(
            "Main Menu",
            choices=[PUT_CHOICE, GET_CHOICE, EXIT_CHOICE],
        ).ask()

        if choice is None or choice == EXIT_CHOICE:
            console.print("[bold]Bye![/bold]")
            break
        elif choice == PUT_CHOICE:
            put_menu(service)
        elif choice == GET_CHOICE:
            get_menu(service)

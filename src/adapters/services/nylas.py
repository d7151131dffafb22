"""Façade del nylas-service (cuentas de email, adjuntos, calendarios, scheduler).

Referencia de la API subyacente: https://docs.nylas.com/reference

Nota:
- Las cuentas se identifican por dirección de email en la query (`email`).
- `upload_attachment` no tiene token de cancelación: se cancela la tarea
  que la espera.
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse

FileContent = Any


class NylasService(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.NYLAS, settings, client)

    async def authorize_user(self, code: str, is_gmail: bool = False) -> ApiResponse:
        """Autoriza al usuario con el `code` del callback de Nylas."""

        return await self.invoke_api(
            "/account",
            "POST",
            params={"command": "authorize", "nativeAuth": False, "isGmail": is_gmail, "code": code},
        )

    async def native_auth(self, auth_request: Mapping[str, Any]) -> ApiResponse:
        """Autoriza con credenciales IMAP/SMTP explícitas."""

        return await self.invoke_api(
            "/account",
            "POST",
            auth_request,
            params={"nativeAuth": True, "command": "authorize"},
        )

    async def reactivate(self, email: str) -> ApiResponse:
        """Reactiva una cuenta 'cancelled' y la vuelve a poner en 'paid'."""

        return await self.invoke_api("/reactivate", "POST", params={"email": email})

    async def send_mail(self, email_account: str, email: Mapping[str, Any]) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/nylas/send",
            "POST",
            email,
            params={"email": email_account},
        )

    async def fetch_attachment_metadata(self, email_account: str, attachment_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            f"/nylas/files/{attachment_id}",
            "GET",
            params={"email": email_account},
        )

    async def upload_attachment(
        self,
        email_account: str,
        file: FileContent,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> ApiResponse:
        """Sube un adjunto (multipart, campo `file`).

        `file` admite bytes o un objeto tipo fichero abierto en binario.
        """

        if filename is None:
            part: Any = file
        elif content_type is None:
            part = (filename, file)
        else:
            part = (filename, file, content_type)
        return await self.invoke_api_with_error_handling(
            "/nylas/files",
            "POST",
            files={"file": part},
            params={"email": email_account},
        )

    async def remove_attachment(self, email_account: str, attachment_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            f"/nylas/files/{attachment_id}",
            "DELETE",
            params={"email": email_account},
        )

    async def fetch_config(self) -> ApiResponse:
        return await self.invoke_api("/config", "GET")

    async def get_registration_url(
        self,
        email: str,
        callback_url: str | None = None,
        is_gmail: bool = False,
        sync_emails: bool = False,
        owner_id: str | None = None,
    ) -> ApiResponse:
        """URL del flujo de autorización hosted de Nylas.

        `sync_emails` es el estado inicial de sincronización de la cuenta;
        `owner_id` es el dueño de la cuenta, que puede no ser su creador.
        """

        return await self.invoke_api(
            "/registration-url",
            "GET",
            params={
                "email": email,
                "callbackUrl": callback_url,
                "isGmail": is_gmail,
                "initialEmailSyncStatus": sync_emails,
                "ownerId": owner_id,
            },
        )

    async def overwrite_settings(self, config: Mapping[str, Any]) -> ApiResponse:
        """Sustituye la configuración; los valores omitidos quedan a null."""

        return await self.invoke_api("/config", "POST", config)

    async def update_settings(self, config: Mapping[str, Any]) -> ApiResponse:
        """Actualiza solo los valores enviados."""

        return await self.invoke_api("/config", "PATCH", config)

    async def save_default_email(self, email: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/default-account", "POST", params={"email": email})

    async def remove_default_email(self) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/default-account", "DELETE")

    async def delete_account(self, email: str) -> ApiResponse:
        # El backend aún no implementa el borrado de cuentas.
        return await self.invoke_api("/account", "DELETE", params={"email": email})

    async def fetch_mail_settings(self, mail: str) -> ApiResponse:
        """Configuración conocida del proveedor de `mail`."""

        return await self.invoke_api("/mailsettings", "POST", {"mail": mail})

    async def fetch_calendars(self, email: str) -> ApiResponse:
        return await self.invoke_api("/nylas/calendars", "GET", params={"email": email})

    async def fetch_scheduler_pages(self, account_id: str) -> ApiResponse:
        return await self.invoke_api("/schedule/manage/pages", "GET", params={"account_id": account_id})

    async def create_scheduler_page(self, account_id: str, payload: Mapping[str, Any]) -> ApiResponse:
        """Crea una página de scheduler; el payload es genérico y se reenvía tal cual."""

        return await self.invoke_api(
            "/schedule/manage/pages",
            "POST",
            payload,
            params={"account_id": account_id},
        )

    async def delete_scheduler_page(self, account_id: str, page_id: int) -> ApiResponse:
        return await self.invoke_api(
            f"/schedule/manage/pages/{page_id}",
            "DELETE",
            params={"account_id": account_id},
        )

    async def get_account_info(self, email: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/account-info", "GET", params={"email": email})

    async def add_manual_account(self, account: Mapping[str, Any]) -> ApiResponse:
        """Cuenta manual usada por el add-in de Outlook para sincronizar."""

        return await self.invoke_api_with_error_handling("/manual-account", "POST", account)

    async def create_shared_accounts_list(self, shared_accounts: Mapping[str, Any]) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/shared-accounts", "POST", shared_accounts)

    async def update_shared_accounts_list(self, shared_accounts: Mapping[str, Any]) -> ApiResponse:
        """Sobrescribe todas las entradas de cuentas compartidas."""

        return await self.invoke_api_with_error_handling("/shared-accounts", "PUT", shared_accounts)

    async def delete_shared_accounts(self, email: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(f"/shared-accounts/emails/{email}", "DELETE")

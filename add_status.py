#!/usr/bin/env python3
"""
add-status - Jira Current Status updater

Bulk update the "Current Status" custom field on Jira tickets. Each update
prepends a (dated) note to the field's existing history, with a preview,
a per-ticket confirmation or an unattended apply-all run.

Copyright (c) 2025
All rights reserved.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

1. Redistributions of source code must retain the above copyright notice, this
   list of conditions and the following disclaimer.

2. Redistributions in binary form must reproduce the above copyright notice,
   this list of conditions and the following disclaimer in the documentation
   and/or other materials provided with the distribution.

3. Neither the name of the copyright holder nor the names of its
   contributors may be used to endorse or promote products derived from
   this software without specific prior written permission.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
"""

import requests
import sys
import os
import shutil
import subprocess
import logging
from datetime import date, datetime, timezone
from typing import Callable, Dict, List, Optional
from dataclasses import dataclass, field
import argparse
import configparser
from enum import Enum

__version__ = "1.0.0"


# Constants
class Constants:
    """Application constants."""

    # API
    API_TIMEOUT = 30
    API_BATCH_SIZE = 100

    # Defaults
    DEFAULT_BASE_URL = "https://jira.cfdata.org"
    DEFAULT_FIELD_NAME = "Current Status"
    DEFAULT_JQL = (
        'project = RM AND teams in ("Workers Authoring & Testing") '
        'AND status = "In Progress"'
    )
    DEFAULT_CONFIG_PATH = "~/.config/add-status"

    # Interactive answers
    YES_ANSWERS = {"y", "yes"}
    ALL_ANSWERS = {"a", "all"}
    SKIP_ALL_ANSWERS = {"s", "skip", "skip all"}

    PROMPT = "Apply this update? [y/n/a(all)/s(skip all)]: "
    SEPARATOR = "─" * 60


class LogLevel(Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class RunMode(Enum):
    """How a batch of status updates is applied."""

    DRY_RUN = "dry-run"
    INTERACTIVE = "interactive"
    APPLY_ALL = "apply-all"


class JiraError(Exception):
    """Base exception for Jira-related errors."""

    pass


class AuthenticationError(JiraError):
    """No valid credential, or the server rejected it."""

    pass


class ConfigError(JiraError):
    """Config file missing or unreadable."""

    pass


class FieldResolutionError(JiraError):
    """The tracked custom field does not exist on the server."""

    pass


class APIError(JiraError):
    """General API error."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class QueryError(APIError):
    """Searching for issues failed."""

    pass


class UpdateError(APIError):
    """Updating a single issue failed."""

    pass


def setup_logging(
    level: LogLevel = LogLevel.INFO, include_timestamp: bool = True
) -> logging.Logger:
    """Set up logging configuration."""
    logger = logging.getLogger("add-status")
    logger.setLevel(level.value)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)

    if include_timestamp:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = logging.Formatter("%(levelname)s - %(message)s")

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class Colors:
    """ANSI color codes for terminal output."""

    GREEN = "\033[92m"  # Proposed values, successes
    RED = "\033[91m"  # Failures

    # Text formatting
    BOLD = "\033[1m"  # Separators, headings
    DIM = "\033[2m"  # Details/metadata

    BLUE = "\033[94m"  # Issue keys
    CYAN = "\033[96m"  # Prompts
    YELLOW = "\033[93m"  # Current values, skips

    # Reset
    RESET = "\033[0m"  # Reset to default

    @staticmethod
    def disable_colors():
        """Disable colors for non-terminal output."""
        Colors.GREEN = Colors.RED = Colors.BOLD = Colors.DIM = ""
        Colors.BLUE = Colors.CYAN = Colors.YELLOW = Colors.RESET = ""


@dataclass(frozen=True)
class JiraIssue:
    key: str
    summary: str
    status: str
    fields: Dict = field(default_factory=dict)

    @classmethod
    def from_api(cls, issue_data: Dict) -> "JiraIssue":
        """Create a JiraIssue snapshot from a search result entry."""
        fields = issue_data.get("fields") or {}
        return cls(
            key=issue_data.get("key", ""),
            summary=fields.get("summary") or "",
            status=(fields.get("status") or {}).get("name", ""),
            fields=dict(fields),
        )


@dataclass
class StatusUpdateRequest:
    """What to prepend, and to which tickets."""

    status_update: str
    add_date_prefix: bool = True
    jql: str = Constants.DEFAULT_JQL


@dataclass
class BatchState:
    """Latches and counters threaded through one batch run."""

    apply_all: bool = False
    skip_all: bool = False
    updated: int = 0
    skipped: int = 0
    failed: List[str] = field(default_factory=list)


class JiraConfig:
    def __init__(self, config_path: Optional[str] = None) -> None:
        explicit = config_path is not None
        if config_path is None:
            config_path = os.path.expanduser(Constants.DEFAULT_CONFIG_PATH)

        self.config_path = config_path
        self.config = configparser.ConfigParser(interpolation=None)

        if os.path.exists(config_path):
            try:
                self.config.read(config_path)
            except configparser.Error as e:
                raise ConfigError(f"Cannot parse config file {config_path}: {e}")
        elif explicit:
            raise ConfigError(f"Config file not found: {config_path}")

    def get(self, section: str, key: str, fallback: str = None) -> str:
        return self.config.get(section, key, fallback=fallback)

    @property
    def base_url(self) -> str:
        return (
            self.get("jira", "base_url")
            or self.get("DEFAULT", "base_url")
            or Constants.DEFAULT_BASE_URL
        )

    @property
    def field_name(self) -> str:
        return (
            self.get("jira", "field_name")
            or self.get("DEFAULT", "field_name")
            or Constants.DEFAULT_FIELD_NAME
        )

    @property
    def default_jql(self) -> str:
        return (
            self.get("jira", "default_jql")
            or self.get("DEFAULT", "default_jql")
            or Constants.DEFAULT_JQL
        )


class CloudflaredAuth:
    """Obtain Jira access tokens through `cloudflared access`."""

    def __init__(self, base_url: str, binary: str = "cloudflared") -> None:
        self.base_url = base_url.rstrip("/")
        self.binary = binary
        self.logger = logging.getLogger("add-status")

    def login(self) -> None:
        """Run the browser based login, with the terminal attached."""
        if shutil.which(self.binary) is None:
            raise AuthenticationError(
                f"{self.binary} is not installed. Please install it first:\n"
                "  brew install cloudflared\n"
                "or visit: https://developers.cloudflare.com/cloudflare-one/"
                "connections/connect-apps/install-and-setup/installation/"
            )

        self.logger.debug(f"Running {self.binary} access login {self.base_url}")
        result = subprocess.run([self.binary, "access", "login", self.base_url])
        if result.returncode != 0:
            raise AuthenticationError("Authentication failed")

    def get_token(self) -> str:
        """Return the current access token for the Jira host."""
        message = (
            'Failed to get access token. Please run "add-status auth" '
            "to authenticate first."
        )
        try:
            result = subprocess.run(
                [self.binary, "access", "token", self.base_url],
                capture_output=True,
                text=True,
            )
        except (FileNotFoundError, subprocess.SubprocessError) as e:
            self.logger.debug(f"Token lookup failed: {e}")
            raise AuthenticationError(message)

        token = result.stdout.strip()
        if result.returncode != 0 or not token:
            self.logger.debug(f"Token lookup failed: {result.stderr.strip()}")
            raise AuthenticationError(message)
        return token

    def is_authenticated(self) -> bool:
        try:
            self.get_token()
            return True
        except AuthenticationError:
            return False


class JiraStatusClient:
    """Read and write one custom text field on Jira issues."""

    def __init__(
        self,
        base_url: str,
        token_provider: Callable[[], str],
        field_name: str = Constants.DEFAULT_FIELD_NAME,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token_provider = token_provider
        self.field_name = field_name
        self.session = requests.Session()
        self.session.headers.update(
            {"Content-Type": "application/json", "Accept": "application/json"}
        )
        self._field_id: Optional[str] = None
        self.logger = logging.getLogger("add-status")

    def _headers(self) -> Dict[str, str]:
        # Tokens expire, so ask for one on every request.
        return {"cf-access-token": self.token_provider()}

    def _handle_response_errors(
        self, response: requests.Response, error_cls=APIError
    ) -> None:
        """Raise error_cls for any non-success response."""
        if response.status_code == 401:
            raise AuthenticationError(
                'Jira rejected the access token. Please run "add-status auth".'
            )
        elif response.status_code == 403:
            raise AuthenticationError("Access forbidden (check permissions)")
        elif not response.ok:
            text = response.text or ""
            raise error_cls(
                f"Jira API error ({response.status_code}): {text[:500]}",
                status_code=response.status_code,
                response_text=text[:500] or None,
            )

    def _get(self, endpoint: str, error_cls=APIError, **kwargs):
        url = f"{self.base_url}/rest/api/2{endpoint}"
        try:
            response = self.session.get(
                url, headers=self._headers(), timeout=Constants.API_TIMEOUT, **kwargs
            )
        except requests.RequestException as e:
            raise error_cls(f"Request to {url} failed: {e}")
        self._handle_response_errors(response, error_cls)
        return response.json()

    def get_status_field_id(self) -> str:
        """Find the id of the tracked custom field, once per client."""
        if self._field_id:
            return self._field_id

        fields = self._get("/field")
        for jira_field in fields:
            if jira_field.get("name") == self.field_name and jira_field.get("custom"):
                self._field_id = jira_field["id"]
                self.logger.debug(f"Resolved '{self.field_name}' to {self._field_id}")
                return self._field_id

        raise FieldResolutionError(
            f'Could not find "{self.field_name}" custom field. '
            "Make sure this field exists in your Jira project."
        )

    def search_issues(self, jql: str) -> List[JiraIssue]:
        """Return the issues matching jql, in the order Jira returns them."""
        field_id = self.get_status_field_id()
        params = {
            "jql": jql,
            "fields": f"summary,status,{field_id}",
            "maxResults": Constants.API_BATCH_SIZE,
        }

        self.logger.info(f"Searching issues: {jql}")
        data = self._get("/search", error_cls=QueryError, params=params)
        issues = [JiraIssue.from_api(item) for item in data.get("issues", [])]

        total = data.get("total", len(issues))
        if total > len(issues):
            self.logger.warning(
                f"Query matched {total} issues, only the first {len(issues)} "
                "will be processed"
            )
        return issues

    def read_status(self, issue: JiraIssue) -> Optional[str]:
        """Return the tracked field's value from an issue snapshot."""
        value = issue.fields.get(self.get_status_field_id())
        if isinstance(value, str):
            return value
        return None

    def update_status(self, issue_key: str, new_status: str) -> None:
        """Write new_status into the tracked field of a single issue."""
        field_id = self.get_status_field_id()
        url = f"{self.base_url}/rest/api/2/issue/{issue_key}"
        payload = {"fields": {field_id: new_status}}

        try:
            response = self.session.put(
                url,
                json=payload,
                headers=self._headers(),
                timeout=Constants.API_TIMEOUT,
            )
        except requests.RequestException as e:
            raise UpdateError(f"Request to {url} failed: {e}")

        self._handle_response_errors(response, UpdateError)
        self.logger.debug(f"Updated {field_id} on {issue_key}")


def build_new_status(
    status_update: str,
    current_status: Optional[str],
    add_date_prefix: bool,
    today: Optional[date] = None,
) -> str:
    """Prepend status_update (optionally dated) to the existing field content.

    Blank or whitespace-only existing content is dropped.
    """
    new_line = status_update
    if add_date_prefix:
        if today is None:
            today = datetime.now(timezone.utc).date()
        new_line = f"{today.isoformat()}: {status_update}"

    if current_status and current_status.strip():
        return f"{new_line}\n{current_status}"

    return new_line


class StatusBatch:
    """Apply one status update across a list of issues."""

    def __init__(
        self,
        client: JiraStatusClient,
        status_update: str,
        add_date_prefix: bool = True,
        prompt: Optional[Callable[[str], str]] = None,
        today: Optional[date] = None,
    ) -> None:
        self.client = client
        self.status_update = status_update
        self.add_date_prefix = add_date_prefix
        self.prompt = prompt or input
        self.today = today
        self.logger = logging.getLogger("add-status")

        # Disable colors if not outputting to a terminal
        if not sys.stdout.isatty():
            Colors.disable_colors()

    def _propose(self, issue: JiraIssue):
        current_status = self.client.read_status(issue)
        new_status = build_new_status(
            self.status_update, current_status, self.add_date_prefix, self.today
        )
        return current_status, new_status

    def display_ticket_update(
        self, issue: JiraIssue, current_status: Optional[str], new_status: str
    ) -> None:
        print(f"\n{Colors.BOLD}{Constants.SEPARATOR}{Colors.RESET}")
        print(
            f"{Colors.BOLD}{Colors.BLUE}{issue.key}{Colors.RESET}"
            f"{Colors.DIM} - {issue.summary}{Colors.RESET}"
        )
        print(f"{Colors.DIM}Status: {issue.status}{Colors.RESET}")
        print()

        print(f"{Colors.YELLOW}Current Status Field:{Colors.RESET}")
        if current_status:
            print(f"{Colors.DIM}{current_status}{Colors.RESET}")
        else:
            print(f"{Colors.DIM}(empty){Colors.RESET}")
        print()

        print(f"{Colors.GREEN}Proposed New Value:{Colors.RESET}")
        print(new_status)

    def _apply(self, issue: JiraIssue, new_status: str, state: BatchState) -> None:
        print(f"Updating {issue.key}...")
        try:
            self.client.update_status(issue.key, new_status)
        except JiraError as e:
            self.logger.error(f"Failed to update {issue.key}: {e}")
            print(f"  {Colors.RED}✗ Failed to update {issue.key}: {e}{Colors.RESET}")
            state.failed.append(issue.key)
            return

        print(f"  {Colors.GREEN}✓ Updated {issue.key}{Colors.RESET}")
        state.updated += 1

    def run_dry_run(self, issues: List[JiraIssue]) -> int:
        """Show every proposed change without writing anything."""
        print(f"{Colors.BOLD}{Colors.YELLOW}\n[DRY RUN] No changes will be made.\n{Colors.RESET}")

        for issue in issues:
            current_status, new_status = self._propose(issue)
            self.display_ticket_update(issue, current_status, new_status)

        print(f"\n{Colors.BOLD}{Constants.SEPARATOR}{Colors.RESET}")
        print(
            f"{Colors.BOLD}{Colors.YELLOW}[DRY RUN] Would update "
            f"{len(issues)} ticket(s){Colors.RESET}"
        )
        return len(issues)

    def run_interactive(
        self, issues: List[JiraIssue], apply_all: bool = False
    ) -> BatchState:
        """Confirm each ticket with the operator, or apply all of them."""
        state = BatchState(apply_all=apply_all)

        for issue in issues:
            if state.skip_all:
                state.skipped += 1
                continue

            current_status, new_status = self._propose(issue)
            self.display_ticket_update(issue, current_status, new_status)

            if state.apply_all:
                self._apply(issue, new_status, state)
                continue

            print()
            answer = self.prompt(
                f"{Colors.CYAN}{Constants.PROMPT}{Colors.RESET}"
            ).lower().strip()

            if answer in Constants.YES_ANSWERS:
                self._apply(issue, new_status, state)
            elif answer in Constants.ALL_ANSWERS:
                state.apply_all = True
                self._apply(issue, new_status, state)
            elif answer in Constants.SKIP_ALL_ANSWERS:
                state.skip_all = True
                state.skipped += 1
                print(f"{Colors.YELLOW}Skipping remaining tickets...{Colors.RESET}")
            else:
                state.skipped += 1
                print(f"{Colors.YELLOW}Skipped {issue.key}{Colors.RESET}")

        self.print_summary(state)
        return state

    def print_summary(self, state: BatchState) -> None:
        print(f"\n{Colors.BOLD}{Constants.SEPARATOR}{Colors.RESET}")
        print(f"{Colors.BOLD}Summary:{Colors.RESET}")
        print(f"{Colors.GREEN}  Updated: {state.updated}{Colors.RESET}")
        print(f"{Colors.YELLOW}  Skipped: {state.skipped}{Colors.RESET}")
        if state.failed:
            print(
                f"{Colors.RED}  Failed: {len(state.failed)} "
                f"({', '.join(state.failed)}){Colors.RESET}"
            )
        self.logger.info(
            f"Batch finished: {state.updated} updated, {state.skipped} skipped, "
            f"{len(state.failed)} failed"
        )

    def run(self, issues: List[JiraIssue], mode: RunMode):
        if mode is RunMode.DRY_RUN:
            return self.run_dry_run(issues)
        return self.run_interactive(issues, apply_all=mode is RunMode.APPLY_ALL)


def select_run_mode(dry_run: bool, yes: bool) -> RunMode:
    if dry_run:
        return RunMode.DRY_RUN
    if yes:
        return RunMode.APPLY_ALL
    return RunMode.INTERACTIVE


def load_config(config_path: Optional[str] = None) -> JiraConfig:
    """Load the config file, exiting with a message if it is unusable."""
    try:
        return JiraConfig(config_path)
    except ConfigError as e:
        print(f"Error: {e}")
        print("Use 'create-config' action to create a sample config file.")
        sys.exit(1)


def process_status_update(
    client: JiraStatusClient,
    request: StatusUpdateRequest,
    mode: RunMode,
    prompt: Optional[Callable[[str], str]] = None,
):
    """Query the tickets for request and run the batch in the given mode.

    Query and field resolution errors propagate to the caller.
    """
    print("Searching for tickets...")
    issues = client.search_issues(request.jql)
    print(f"Found {len(issues)} ticket(s)")

    if not issues:
        print(f"{Colors.YELLOW}No tickets found matching the query.{Colors.RESET}")
        print(f"{Colors.DIM}JQL: {request.jql}{Colors.RESET}")
        return None

    print(f"{Colors.DIM}JQL: {request.jql}{Colors.RESET}")

    batch = StatusBatch(
        client, request.status_update, request.add_date_prefix, prompt=prompt
    )
    return batch.run(issues, mode)


def create_sample_config(config_path: Optional[str] = None) -> None:
    """Create a sample config file."""
    if config_path is None:
        config_path = os.path.expanduser(Constants.DEFAULT_CONFIG_PATH)
    config_dir = os.path.dirname(config_path)

    if config_dir:
        os.makedirs(config_dir, exist_ok=True)

    sample_config = f"""[jira]
base_url = {Constants.DEFAULT_BASE_URL}
field_name = {Constants.DEFAULT_FIELD_NAME}
default_jql = {Constants.DEFAULT_JQL}
"""

    with open(config_path, "w") as f:
        f.write(sample_config)

    print(f"Sample config created at {config_path}")
    print("Edit it to point at your Jira instance and ticket query.")


def action_create_config(args) -> None:
    """Create a sample config file."""
    create_sample_config(args.config)


def action_auth(args) -> None:
    """Log in to Jira through cloudflared."""
    logger = logging.getLogger("add-status")
    config = load_config(args.config)
    auth = CloudflaredAuth(config.base_url)

    print(f"{Colors.BLUE}Authenticating with Jira via Cloudflare Access...\n{Colors.RESET}")
    try:
        auth.login()
    except AuthenticationError as e:
        logger.error(f"Authentication failed: {e}")
        print(f"{Colors.RED}{e}{Colors.RESET}")
        sys.exit(1)

    print(f"{Colors.GREEN}\nAuthentication successful! Token valid for 24 hours.{Colors.RESET}")


def action_update(args) -> None:
    """Prepend a status note to the Current Status field of matching tickets."""
    logger = logging.getLogger("add-status")
    config = load_config(args.config)
    auth = CloudflaredAuth(config.base_url)

    if not auth.is_authenticated():
        logger.error("No valid access token")
        print(f"{Colors.RED}Not authenticated. Please run \"add-status auth\" first.{Colors.RESET}")
        sys.exit(1)

    request = StatusUpdateRequest(
        status_update=args.status,
        add_date_prefix=args.date_prefix,
        jql=args.jql or config.default_jql,
    )
    mode = select_run_mode(args.dry_run, args.yes)
    logger.info(f"Running status update in {mode.value} mode")

    client = JiraStatusClient(config.base_url, auth.get_token, config.field_name)

    try:
        process_status_update(client, request, mode)
    except FieldResolutionError as e:
        logger.error(f"Field lookup failed: {e}")
        print(f"{Colors.RED}Error: {e}{Colors.RESET}")
        sys.exit(1)
    except JiraError as e:
        logger.error(f"Failed to search for tickets: {e}")
        print(f"{Colors.RED}Failed to search for tickets{Colors.RESET}")
        print(f"{Colors.RED}Error: {e}{Colors.RESET}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="add-status",
        description="Bulk update the Current Status field on Jira tickets",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", help=f"Path to config file (default: {Constants.DEFAULT_CONFIG_PATH})"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set logging level",
    )
    parser.add_argument(
        "--no-timestamp", action="store_true", help="Disable timestamps in log output"
    )

    subparsers = parser.add_subparsers(
        dest="action", required=True, help="Available actions"
    )

    # create-config action
    create_config_parser = subparsers.add_parser(
        "create-config", help="Create a sample config file"
    )
    create_config_parser.set_defaults(func=action_create_config)

    # auth action
    auth_parser = subparsers.add_parser(
        "auth", help="Authenticate with Jira via cloudflared (valid for 24h)"
    )
    auth_parser.set_defaults(func=action_auth)

    # update action
    update_parser = subparsers.add_parser(
        "update", help="Prepend a status update to matching tickets"
    )
    update_parser.add_argument("status", help="Status update text to prepend")
    update_parser.add_argument(
        "--jql", help="Custom JQL query (default: from config)"
    )
    update_parser.add_argument(
        "--dry-run", action="store_true", help="Preview changes without applying"
    )
    update_parser.add_argument(
        "--no-date-prefix",
        dest="date_prefix",
        action="store_false",
        help="Skip the automatic YYYY-MM-DD: prefix",
    )
    update_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Apply the update to every ticket without asking",
    )
    update_parser.set_defaults(func=action_update)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set up logging
    log_level = LogLevel(args.log_level)
    setup_logging(log_level, not args.no_timestamp)

    logger = logging.getLogger("add-status")
    logger.info(f"Starting add-status with action: {args.action}")

    try:
        args.func(args)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        print("\nOperation cancelled.")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Browse and edit the company directory from the command line.

The CLI drives a ``DirectorySession`` against a running API and prints
the current page of companies.  Every invocation fetches the full list
and filters, sorts and paginates it locally.

Usage:
    python directory_cli.py list --industry Technology --sort employees --desc --page 2
    python directory_cli.py create --name Acme --ceo "Jane Doe" --industry Technology --location London
    python directory_cli.py update 3f2a... --employees 120
    python directory_cli.py delete 3f2a...

The API location is taken from --api-url or ``DIRECTORY_API_URL``.
Exit codes: 0 on success, 1 when the API cannot be reached, 2 when the
request was rejected or the company does not exist.
"""

import argparse
import os
import sys

from company_directory.app.core.config import settings
from company_directory.app.core.logging_config import setup_logging
from company_directory.view.icons import glyph_for, resolve_icon
from company_directory.view.session import DirectorySession
from company_directory.view.state import ASC, DESC, SORT_FIELDS
from directory_api import CompanyDirectoryAPI

EXIT_OK = 0
EXIT_TRANSPORT = 1
EXIT_REJECTED = 2

FIELD_OPTIONS = ("name", "ceo", "industry", "location", "employees", "founded", "logoIcon")


def format_company(company: dict) -> str:
    glyph = glyph_for(resolve_icon(company.get("logoIcon")))
    employees = company.get("employees") or 0
    return (
        f"{glyph} {company.get('name')} [{company.get('industry')}] - {company.get('location')}\n"
        f"    CEO: {company.get('ceo')} | Employees: {employees:,} | Founded: {company.get('founded')}\n"
        f"    id: {company.get('id')}"
    )


def render(session: DirectorySession) -> str:
    result = session.view()
    if not result.page_items:
        return "No companies found. Try adjusting your filters."
    lines = [format_company(company) for company in result.page_items]
    if result.needs_pagination:
        lines.append(f"Page {session.state.pagination.current_page} of {result.total_pages} "
                     f"({result.total_count} companies)")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Company directory client.")
    ap.add_argument("--api-url", default=os.getenv("DIRECTORY_API_URL"), help="Base URL of the API (…/api/v1)")
    ap.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "WARNING"))
    sub = ap.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="Show one page of companies")
    ls.add_argument("--search", default="")
    ls.add_argument("--industry", default="All")
    ls.add_argument("--location", default="All")
    ls.add_argument("--sort", choices=SORT_FIELDS, default="name")
    ls.add_argument("--desc", action="store_true", help="Sort descending")
    ls.add_argument("--page", type=int, default=1)
    ls.add_argument("--page-size", type=int, default=settings.page_size)

    create = sub.add_parser("create", help="Create a company")
    update = sub.add_parser("update", help="Update a company")
    update.add_argument("id")
    for p in (create, update):
        p.add_argument("--name")
        p.add_argument("--ceo")
        p.add_argument("--industry")
        p.add_argument("--location")
        p.add_argument("--employees", type=int)
        p.add_argument("--founded", type=int)
        p.add_argument("--logo-icon", dest="logoIcon")

    delete = sub.add_parser("delete", help="Delete a company")
    delete.add_argument("id")
    return ap


def _payload(args: argparse.Namespace) -> dict:
    return {name: getattr(args, name) for name in FIELD_OPTIONS if getattr(args, name) is not None}


def _report_failure(session: DirectorySession) -> int:
    if session.form is not None and session.form.error:
        print(f"[!] Invalid data: {session.form.error}", file=sys.stderr)
        return EXIT_REJECTED
    if session.notice:
        print(f"[!] {session.notice}", file=sys.stderr)
        return EXIT_REJECTED
    if session.fault:
        print(f"[!] Data consistency fault: {session.fault}", file=sys.stderr)
        return EXIT_REJECTED
    print(f"[!] {session.error}", file=sys.stderr)
    return EXIT_TRANSPORT


def main(argv=None, api=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    session = DirectorySession(
        api or CompanyDirectoryAPI(base_url=args.api_url),
        page_size=getattr(args, "page_size", None),
    )

    if not session.refresh():
        print(f"[!] {session.error}", file=sys.stderr)
        return EXIT_TRANSPORT

    if args.command == "list":
        session.set_filter("search", args.search)
        session.set_filter("industry", args.industry)
        session.set_filter("location", args.location)
        session.set_sort(args.sort, DESC if args.desc else ASC)
        session.go_to_page(args.page)
        print(render(session))
        return EXIT_OK

    if args.command == "create":
        session.open_create_form()
        if not session.submit_form(_payload(args)):
            return _report_failure(session)
        print(f"[+] Created company: {session.records[0].get('name')}")
        print(format_company(session.records[0]))
        return EXIT_OK

    if args.command == "update":
        try:
            session.open_edit_form(args.id)
        except KeyError:
            print(f"[!] No company found with id: {args.id}", file=sys.stderr)
            return EXIT_REJECTED
        if not session.submit_form(_payload(args)):
            return _report_failure(session)
        print(f"[+] Updated company: {args.id}")
        return EXIT_OK

    if not session.delete(args.id):
        return _report_failure(session)
    print(f"[+] Deleted company: {args.id}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

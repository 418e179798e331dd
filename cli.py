import json
import logging

import click

from config.constants import MemberStatus, CollectionStatus, MEETING_DAYS
from config.settings import EXCEL_FILE, REPORT_FILE, DEFAULT_LOAN_WEEKS, LOG_LEVEL, LOG_FORMAT
from core.ledger import MicrofinanceLedger
from core.reports import (
    records_to_frame, member_summary_frame, group_summary_frame,
    weekly_frame, overall_frame, export_report,
)
from data_manager.data_validator import validate_group, validate_member, validate_collection
from data_manager.storage import ExcelStore
from utils.date_utils import parse_iso_date, today_iso, installment_due_date


def _ledger(ctx) -> MicrofinanceLedger:
    return ctx.obj["ledger"]


def _echo_records(records, empty_message: str):
    if not records:
        click.echo(empty_message)
        return
    click.echo(records_to_frame(records).to_string(index=False))


def _parse_updates(updates: str) -> dict:
    try:
        updates_dict = json.loads(updates)
    except ValueError as e:
        raise click.BadParameter(f"Invalid JSON: {e}", param_hint="--updates")
    if not isinstance(updates_dict, dict):
        raise click.BadParameter("Updates must be a JSON object", param_hint="--updates")
    return updates_dict


@click.group()
@click.option('--data-file', type=click.Path(dir_okay=False), default=str(EXCEL_FILE), help='Excel workbook holding the records')
@click.option('--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, data_file, verbose):
    """A CLI for the microfinance group lending tracker."""
    logging.basicConfig(level=logging.DEBUG if verbose else LOG_LEVEL, format=LOG_FORMAT)
    ctx.ensure_object(dict)
    ctx.obj["ledger"] = MicrofinanceLedger.open(ExcelStore(data_file))


# ---- Groups ----

@cli.command('list-groups')
@click.pass_context
def list_groups(ctx):
    """Lists all groups."""
    _echo_records(_ledger(ctx).groups, "No groups.")


@cli.command('add-group')
@click.option('--group-no', type=str, required=True, help='Group number')
@click.option('--group-name', type=str, required=True, help='Group name')
@click.option('--head-name', type=str, default='', help='Group head name')
@click.option('--head-contact', type=str, default='', help='Group head contact number')
@click.option('--meeting-day', type=click.Choice(MEETING_DAYS), default='Monday', help='Weekly meeting day')
@click.option('--formation-date', type=str, default=today_iso, help='Formation date (YYYY-MM-DD)')
@click.pass_context
def add_group(ctx, group_no, group_name, head_name, head_contact, meeting_day, formation_date):
    """Adds a new group."""
    ledger = _ledger(ctx)
    ok, msg = validate_group(
        group_no, group_name, meeting_day, formation_date,
        existing_group_nos=[g.group_no for g in ledger.groups],
    )
    if not ok:
        raise click.ClickException(msg)
    group = ledger.add_group({
        'groupNo': group_no,
        'groupName': group_name,
        'groupHeadName': head_name,
        'headContact': head_contact,
        'meetingDay': meeting_day,
        'formationDate': formation_date,
    })
    click.echo(f"Group '{group_no}' added with ID '{group.id}'.")


@cli.command('update-group')
@click.option('--id', 'record_id', type=str, required=True, help='Internal record ID')
@click.option('--updates', type=str, required=True, help='Updates in JSON format')
@click.pass_context
def update_group(ctx, record_id, updates):
    """Updates a group."""
    _ledger(ctx).update_group(record_id, _parse_updates(updates))
    click.echo(f"Group with ID '{record_id}' updated.")


@cli.command('delete-group')
@click.option('--id', 'record_id', type=str, required=True, help='Internal record ID')
@click.pass_context
def delete_group(ctx, record_id):
    """Deletes a group. Its members and collections are kept."""
    _ledger(ctx).delete_group(record_id)
    click.echo(f"Group with ID '{record_id}' deleted.")


# ---- Members ----

@cli.command('list-members')
@click.option('--group-no', type=str, help='Only members of this group')
@click.pass_context
def list_members(ctx, group_no):
    """Lists members."""
    members = _ledger(ctx).members
    if group_no:
        members = [m for m in members if m.group_no == group_no]
    _echo_records(members, "No members.")


@cli.command('add-member')
@click.option('--member-id', type=str, required=True, help='Member ID')
@click.option('--member-name', type=str, required=True, help='Member name')
@click.option('--group-no', type=str, required=True, help='Group number')
@click.option('--loan-amount', type=float, required=True, help='Loan principal disbursed')
@click.option('--total-interest', type=float, required=True, help='Total interest over the loan term')
@click.option('--weeks', type=int, default=DEFAULT_LOAN_WEEKS, help='Number of weekly installments')
@click.option('--start-date', type=str, default=today_iso, help='Start date (YYYY-MM-DD)')
@click.option('--address', type=str, default='', help='Address')
@click.option('--landmark', type=str, default='', help='Landmark')
@click.option('--status', type=click.Choice([s.value for s in MemberStatus]), default='Active', help='Loan status')
@click.pass_context
def add_member(ctx, member_id, member_name, group_no, loan_amount, total_interest, weeks, start_date, address, landmark, status):
    """Adds a new member."""
    ledger = _ledger(ctx)
    ok, msg = validate_member(
        member_id, member_name, group_no, loan_amount, total_interest, weeks, start_date, status,
        existing_member_ids=[m.member_id for m in ledger.members],
        known_group_nos=[g.group_no for g in ledger.groups],
    )
    if not ok:
        raise click.ClickException(msg)
    member = ledger.add_member({
        'memberId': member_id,
        'memberName': member_name,
        'address': address,
        'landmark': landmark,
        'groupNo': group_no,
        'loanAmount': loan_amount,
        'totalInterest': total_interest,
        'weeks': weeks,
        'startDate': start_date,
        'status': status,
    })
    click.echo(f"Member '{member_id}' added with ID '{member.id}'.")


@cli.command('update-member')
@click.option('--id', 'record_id', type=str, required=True, help='Internal record ID')
@click.option('--updates', type=str, required=True, help='Updates in JSON format')
@click.pass_context
def update_member(ctx, record_id, updates):
    """Updates a member. Past collections keep their allocation."""
    _ledger(ctx).update_member(record_id, _parse_updates(updates))
    click.echo(f"Member with ID '{record_id}' updated.")


@cli.command('delete-member')
@click.option('--id', 'record_id', type=str, required=True, help='Internal record ID')
@click.pass_context
def delete_member(ctx, record_id):
    """Deletes a member. Their collections are kept."""
    _ledger(ctx).delete_member(record_id)
    click.echo(f"Member with ID '{record_id}' deleted.")


# ---- Collections ----

@cli.command('list-collections')
@click.option('--member-id', type=str, help='Only collections of this member')
@click.pass_context
def list_collections(ctx, member_id):
    """Lists collections."""
    collections = _ledger(ctx).collections
    if member_id:
        collections = [c for c in collections if c.member_id == member_id]
    _echo_records(collections, "No collections.")


@cli.command('add-collection')
@click.option('--member-id', type=str, required=True, help='Member ID')
@click.option('--week-no', type=int, required=True, help='Installment week number')
@click.option('--amount', type=float, required=True, help='Amount paid')
@click.option('--collection-date', type=str, default=today_iso, help='Collection date (YYYY-MM-DD)')
@click.option('--status', type=click.Choice([s.value for s in CollectionStatus]), default='Paid', help='Collection status')
@click.option('--collected-by', type=str, default='', help='Collecting agent')
@click.pass_context
def add_collection(ctx, member_id, week_no, amount, collection_date, status, collected_by):
    """Records a payment and splits it into principal and interest."""
    ledger = _ledger(ctx)
    ok, msg = validate_collection(
        member_id, week_no, amount, collection_date,
        known_member_ids=[m.member_id for m in ledger.members],
    )
    if not ok:
        raise click.ClickException(msg)
    member = ledger.store.find_member(member_id)
    collection = ledger.add_collection({
        'collectionDate': collection_date,
        'memberId': member_id,
        'groupNo': member.group_no,
        'weekNo': week_no,
        'amountPaid': amount,
        'status': status,
        'collectedBy': collected_by,
    })
    click.echo(f"Collection '{collection.id}' recorded: principal {collection.principal_paid:.2f}, interest {collection.interest_paid:.2f}")


@cli.command('delete-collection')
@click.option('--id', 'record_id', type=str, required=True, help='Internal record ID')
@click.pass_context
def delete_collection(ctx, record_id):
    """Deletes a collection."""
    _ledger(ctx).delete_collection(record_id)
    click.echo(f"Collection with ID '{record_id}' deleted.")


# ---- Summaries ----

@cli.command('member-summary')
@click.option('--member-id', type=str, help='Member ID, all members if omitted')
@click.pass_context
def member_summary(ctx, member_id):
    """Shows member balances."""
    ledger = _ledger(ctx)
    if member_id is None:
        click.echo(member_summary_frame(ledger).to_string(index=False))
        return
    summary = ledger.get_member_summary(member_id)
    if summary is None:
        click.echo(f"Member '{member_id}' not found.")
        return
    for key, value in summary.to_dict().items():
        click.echo(f"{key}: {value}")


@cli.command('group-summary')
@click.option('--group-no', type=str, help='Group number, all groups if omitted')
@click.pass_context
def group_summary(ctx, group_no):
    """Shows group balances and collection rates."""
    ledger = _ledger(ctx)
    if group_no is None:
        click.echo(group_summary_frame(ledger).to_string(index=False))
        return
    summary = ledger.get_group_summary(group_no)
    if summary is None:
        click.echo(f"Group '{group_no}' not found.")
        return
    for key, value in summary.to_dict().items():
        click.echo(f"{key}: {value}")


@cli.command('overall-summary')
@click.pass_context
def overall_summary(ctx):
    """Shows organization-wide totals and recovery rates."""
    click.echo(overall_frame(_ledger(ctx)).to_string(index=False))


@cli.command('weekly')
@click.pass_context
def weekly(ctx):
    """Shows amount collected per week."""
    df = weekly_frame(_ledger(ctx))
    if df.empty:
        click.echo("No collections.")
        return
    click.echo(df.to_string(index=False))


@cli.command('week-collections')
@click.option('--week-no', type=int, required=True, help='Week number')
@click.pass_context
def week_collections(ctx, week_no):
    """Lists the collections recorded for a week."""
    _echo_records(_ledger(ctx).get_collections_for_week(week_no), f"No collections in week {week_no}.")


@cli.command('expected')
@click.option('--week-no', type=int, default=1, help='Week number')
@click.pass_context
def expected(ctx, week_no):
    """Lists active members that still owe installments."""
    ledger = _ledger(ctx)
    due = ledger.get_expected_collections_for_week(week_no)
    if not due:
        click.echo("No installments outstanding.")
        return
    for summary in due:
        member = ledger.store.find_member(summary.member_id)
        start = parse_iso_date(member.start_date)
        next_due = installment_due_date(start, summary.weeks_paid + 1).isoformat() if start else "-"
        click.echo(
            f"{summary.member_id} {summary.member_name} ({summary.group_no}): "
            f"{summary.weeks_paid}/{member.weeks} paid, balance {summary.total_balance:.2f}, next due {next_due}"
        )


# ---- Data ----

@cli.command('export')
@click.option('--output', type=click.Path(dir_okay=False), help='Write to this file instead of stdout')
@click.pass_context
def export_command(ctx, output):
    """Exports all records as JSON."""
    text = _ledger(ctx).export_json()
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        click.echo(f"Exported to {output}.")
    else:
        click.echo(text)


@cli.command('import')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_command(ctx, input_file):
    """Imports records from a JSON export. Collections missing from the file are kept."""
    with open(input_file, encoding="utf-8") as f:
        text = f.read()
    if not _ledger(ctx).import_json(text):
        raise click.ClickException(f"Could not import {input_file}.")
    click.echo(f"Imported {input_file}.")


@cli.command('clear')
@click.confirmation_option(prompt='Delete all groups, members and collections?')
@click.pass_context
def clear(ctx):
    """Deletes all records."""
    _ledger(ctx).clear_all_data()
    click.echo("All data cleared.")


@cli.command('report')
@click.option('--output', type=click.Path(dir_okay=False), default=str(REPORT_FILE), help='Report workbook path')
@click.pass_context
def report(ctx, output):
    """Writes the summary report workbook."""
    path = export_report(_ledger(ctx), output)
    click.echo(f"Report written to {path}.")


if __name__ == "__main__":
    cli()

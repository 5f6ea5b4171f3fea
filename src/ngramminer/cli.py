# cli.py
from __future__ import annotations

import sys

import click
from botocore.exceptions import BotoCoreError

from ngramminer.assets import AssetStagingError
from ngramminer.aws.emr_client import ClusterClient
from ngramminer.aws.models import RemoteCallFailed
from ngramminer.aws.s3_client import ObjectStore, make_session
from ngramminer.model import RunParameters
from ngramminer.runner import Analyzer, plan_steps
from ngramminer.ui.console import Console, InputExhausted, get_console, set_console
from ngramminer.validation import ValidationError


def _fail(ctx, exc: BaseException) -> None:
    """Print a failure and exit with status 1. Unknown errors go through print_exception."""
    console = get_console()

    if isinstance(exc, ValidationError):
        console.print_error(
            "Invalid input",
            exc.message,
            details=[f"{k}={v}" for k, v in exc.details.items()] or None,
        )
    elif isinstance(exc, RemoteCallFailed):
        console.print_error(
            "AWS request failed",
            str(exc),
            suggestion="Check your credentials, region and the AWS service limits.",
        )
    elif isinstance(exc, AssetStagingError):
        console.print_error(
            "Could not stage the Hive scripts",
            str(exc),
        )
    elif isinstance(exc, InputExhausted):
        console.print_error("Input ended", "No more input was available to answer the prompts.")
    elif isinstance(exc, BotoCoreError):
        console.print_error(
            "AWS session error",
            str(exc),
            suggestion="Configure credentials with `aws configure` or pass --profile.",
        )
    else:
        console.print_exception(exc)

    if ctx.obj.get("debug", False) and not isinstance(exc, (RemoteCallFailed, ValidationError)):
        import traceback
        traceback.print_exc()
    sys.exit(1)


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.pass_context
def cli(ctx, debug):
    """ngram-miner: find neologisms and foreignisms in the Google Books n-grams on EMR."""
    console = Console(debug=debug)
    set_console(console)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


@cli.command()
@click.option("--profile", default=None, help="AWS credentials profile (defaults to the standard chain)")
@click.option("--region", default=None, help="AWS region for the bucket and the cluster")
@click.option("--with-ec2-key/--without-ec2-key", default=False, help="Ask for an EC2 key pair to log into the master")
@click.pass_context
def run(ctx, profile, region, with_ec2_key):
    """Ask for the analysis parameters and launch the cluster."""
    console = get_console()

    try:
        session = make_session(profile, region)
        analyzer = Analyzer(
            console,
            ObjectStore.from_session(session, console=console),
            ClusterClient.from_session(session, console=console),
        )
        analyzer.run(with_ec2_key=with_ec2_key)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        _fail(ctx, e)


@cli.command()
@click.option("--language1", required=True, help="Main language (e.g., eng-all)")
@click.option("--language2", default=None, help="Language the foreignisms come from (defaults to language1)")
@click.option("--from-year", required=True, type=int)
@click.option("--to-year", required=True, type=int)
@click.option("--window-size", required=True, type=int)
@click.option("--percent-of-years", required=True, type=float)
@click.option("--bucket", default="<bucket>", show_default=True, help="Bucket name used in the printed paths")
@click.pass_context
def plan(ctx, language1, language2, from_year, to_year, window_size, percent_of_years, bucket):
    """Print the steps a run would submit, without calling AWS."""
    console = get_console()
    params = RunParameters(
        language1=language1,
        language2=language2 or language1,
        from_year=from_year,
        to_year=to_year,
        window_size=window_size,
        percent_of_years=percent_of_years,
    )
    try:
        steps = plan_steps(params, bucket)
    except ValidationError as e:
        _fail(ctx, e)
    console.print_plan(steps)


@cli.command()
@click.option("--profile", default=None, help="AWS credentials profile (defaults to the standard chain)")
@click.option("--region", default=None, help="AWS region")
@click.pass_context
def languages(ctx, profile, region):
    """List the languages available in the n-gram corpus."""
    console = get_console()
    try:
        store = ObjectStore.from_session(make_session(profile, region), console=console)
        result = store.list_languages()
        if not result.ok:
            raise RemoteCallFailed(result.error)
    except (RemoteCallFailed, BotoCoreError) as e:
        _fail(ctx, e)

    for name in result.value:
        console.print_info(name)


if __name__ == "__main__":
    cli()

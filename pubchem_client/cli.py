import logging
from typing import Optional

import click

from .client import PubChemClient
from .config import DEFAULT_REQUEST_DELAY, CID_NOT_FOUND
from .exceptions import PubChemClientError


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _build_client(delay: float, timeout: Optional[float]) -> PubChemClient:
    """Construct a PubChemClient from the command line options."""
    if delay < 0:
        raise click.UsageError("--delay must be zero or positive.")
    return PubChemClient(delay=delay, timeout=timeout)


@click.group()
@click.option(
    "--delay",
    envvar="PUBCHEM_REQUEST_DELAY",
    type=float,
    default=DEFAULT_REQUEST_DELAY,
    show_default=True,
    help="Seconds to wait after each request (or set PUBCHEM_REQUEST_DELAY).",
)
@click.option(
    "--timeout",
    envvar="PUBCHEM_TIMEOUT",
    type=float,
    default=None,
    help="Request timeout in seconds (or set PUBCHEM_TIMEOUT).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each lookup.")
@click.pass_context
def main(ctx: click.Context, delay: float, timeout: Optional[float], verbose: bool) -> None:
    """PubChem compound lookup command line client."""
    _configure_logging(verbose)
    client = ctx.with_resource(_build_client(delay=delay, timeout=timeout))
    ctx.obj = {"client": client}


def _run(lookup):
    try:
        return lookup()
    except PubChemClientError as e:
        raise click.ClickException(str(e))


@main.command()
@click.argument("name")
@click.pass_context
def cid(ctx: click.Context, name: str) -> None:
    """Resolve a compound NAME to its PubChem CID (-1 if not found)."""
    client: PubChemClient = ctx.obj["client"]
    click.echo(_run(lambda: client.get_cid(name)))


@main.command()
@click.argument("cid", type=int)
@click.pass_context
def cas(ctx: click.Context, cid: int) -> None:
    """Print the CAS registry number of CID."""
    client: PubChemClient = ctx.obj["client"]
    click.echo(_run(lambda: client.get_cas(cid)))


@main.command()
@click.argument("cid", type=int)
@click.pass_context
def properties(ctx: click.Context, cid: int) -> None:
    """Print canonical SMILES and InChIKey of CID."""
    client: PubChemClient = ctx.obj["client"]
    smiles, inchikey = _run(lambda: client.get_properties(cid))
    click.echo(f"SMILES:   {smiles}")
    click.echo(f"InChIKey: {inchikey}")


@main.command()
@click.argument("cid", type=int)
@click.option(
    "--output",
    "-o",
    type=click.File("w"),
    default="-",
    help="File to write the SDF block to (default: stdout).",
)
@click.pass_context
def sdf(ctx: click.Context, cid: int, output) -> None:
    """Fetch the 2D structure of CID as SDF."""
    client: PubChemClient = ctx.obj["client"]
    output.write(_run(lambda: client.get_sdf(cid)))


@main.command()
@click.argument("formula")
@click.pass_context
def formula(ctx: click.Context, formula: str) -> None:
    """Search up to five CIDs matching a molecular FORMULA."""
    client: PubChemClient = ctx.obj["client"]
    result = _run(lambda: client.formula_search(formula))

    click.echo(f"Returned {len(result.cids)} CIDs:")
    for cid_ in result.cids:
        click.echo(f"  {cid_}")
    if not result.complete:
        click.echo("Search still running at PubChem, results may be incomplete.", err=True)


@main.command()
@click.argument("name")
@click.pass_context
def lookup(ctx: click.Context, name: str) -> None:
    """Resolve NAME and print its CID, CAS number, SMILES and InChIKey."""
    client: PubChemClient = ctx.obj["client"]
    cid_ = _run(lambda: client.get_cid(name))
    if cid_ == CID_NOT_FOUND:
        click.echo(f"No PubChem compound found for '{name}'")
        return

    record = _run(lambda: client.get_record(cid_))
    click.echo(f"CID:      {record.cid}")
    click.echo(f"CAS:      {record.cas}")
    click.echo(f"SMILES:   {record.smiles}")
    click.echo(f"InChIKey: {record.inchikey}")


if __name__ == "__main__":
    main()

# review_scraper/cli.py
import logging
from typing import Optional

import typer

from review_scraper.config import DEFAULT_PAGES, ScraperConfig, validate_config
from review_scraper.errors import InvalidConfig
from review_scraper.output import write_reviews
from review_scraper.pipeline import scrape

app = typer.Typer()


@app.callback()
def main(verbose: bool = typer.Option(False, help="Log debug output")):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


@app.command("scrape")
def scrape_command(
    company: str = typer.Option(..., help="Company or product name"),
    start: str = typer.Option(..., help="Start date YYYY-MM-DD"),
    end: str = typer.Option(..., help="End date YYYY-MM-DD"),
    source: str = typer.Option("g2", help="g2 | capterra"),
    cookie: str = typer.Option("", envvar="G2_COOKIE", help="G2 session cookie copied from a logged-in browser"),
    product_id: Optional[str] = typer.Option(None, help="Capterra product id (<id>/<slug>) to skip search"),
    pages: int = typer.Option(DEFAULT_PAGES, help="Number of listing pages to fetch"),
    out_dir: str = typer.Option("reviews", help="Output directory"),
):
    config = ScraperConfig(
        company_name=company,
        start_date=start,
        end_date=end,
        source=source,
        session_cookie=cookie,
        product_id=product_id,
        pages=pages,
    )
    try:
        validate_config(config)
    except InvalidConfig as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Scraping {company} from {source} between {start} and {end} ...")
    try:
        run = scrape(config)
    except Exception as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=2)

    for failure in run.failures:
        typer.echo(f"Skipped page {failure.page}: {failure.error}")
    outpath = write_reviews(run.reviews, company, config.source_enum.value, out_dir=out_dir)
    typer.echo(f"Successfully saved {len(run.reviews)} reviews to {outpath}")


if __name__ == "__main__":
    app()

from datetime import date

import pytest

from review_scraper.config import ScraperConfig


def g2_review_html(title, published, rating="4.5", author="Jane D.", body="Great tool."):
    rating_html = f'<meta itemprop="ratingValue" content="{rating}">' if rating is not None else ""
    return f"""
    <div itemprop="review" itemscope itemtype="http://schema.org/Review">
      <h3 itemprop="name">"{title}"</h3>
      <meta itemprop="datePublished" content="{published}">
      <div itemprop="reviewRating">{rating_html}</div>
      <span itemprop="author">{author}</span>
      <div itemprop="reviewBody"><p>{body}</p> Review collected by and hosted on G2.com.</div>
    </div>
    """


def g2_page(*reviews):
    return "<html><body><div id='pjax-container'>" + "".join(reviews) + "</div></body></html>"


def capterra_card(title, when="24 December 2023", rating="4.0", name="Sam K.",
                  comments="Solid CRM.", pros="Easy setup", cons="Pricey"):
    stars = f'<div class="star-rating-component" data-rating="{rating}"><span class="ms-1">{rating}</span></div>' \
        if rating is not None else ""
    return f"""
    <div class="review-card" data-entity="review">
      <h3 class="fs-3 fw-bold">{title}</h3>
      <div class="review-date">{when}</div>
      <div class="reviewer-name">{name}</div>
      {stars}
      <div><span class="fw-bold">Comments:</span></div><p>{comments}</p>
      <div><span class="fw-bold">Pros:</span></div><p>{pros}</p>
      <div><span class="fw-bold">Cons:</span></div><p>{cons}</p>
    </div>
    """


def capterra_search_page(*hrefs):
    links = "".join(f'<a class="entry" href="{h}">result</a>' for h in hrefs)
    return f"<html><body><div class='results'>{links}</div></body></html>"


@pytest.fixture
def g2_config():
    return ScraperConfig(
        company_name="Acme",
        start_date=date(2023, 1, 1),
        end_date=date(2025, 12, 31),
        source="G2",
    )


@pytest.fixture
def capterra_config():
    return ScraperConfig(
        company_name="Acme",
        start_date=date(2023, 1, 1),
        end_date=date(2025, 12, 31),
        source="CAPTERRA",
    )

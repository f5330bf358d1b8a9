import pytest

from careconnect_agent.assistant import FilterExtractor


@pytest.fixture
def extractor():
    return FilterExtractor()


def test_jobs_under_amount_in_city(extractor):
    filters = extractor.extract("jobs under 50000 in Mumbai")
    assert filters.location == "Mumbai"
    assert filters.max_price == 50000
    assert filters.max_salary == 50000000


def test_min_price_scales_salary(extractor):
    filters = extractor.extract("doctors above 200")
    assert filters.min_price == 200
    assert filters.min_salary == 200000
    assert filters.max_price is None


@pytest.mark.parametrize("phrase", ["below 300", "less than 300", "under 300"])
def test_max_price_phrasings(extractor, phrase):
    assert extractor.extract(f"therapist {phrase}").max_price == 300


def test_top_rated_sets_rating_and_sort(extractor):
    filters = extractor.extract("best cardiologist")
    assert filters.min_rating == 4.5
    assert filters.sort_by == "rating"


def test_verified(extractor):
    assert extractor.extract("licensed lawyer").verified is True
    assert extractor.extract("lawyer").verified is None


def test_job_type_and_arrangement(extractor):
    filters = extractor.extract("remote internship")
    # "remote" is listed before "intern" in the job type table
    assert filters.job_type == "remote"
    assert filters.work_arrangement == "remote"


def test_experience_levels(extractor):
    assert extractor.extract("fresher roles").experience == "entry"
    assert extractor.extract("senior nurse").experience == "senior"
    assert extractor.extract("mid level analyst").experience == "mid"


def test_hybrid_arrangement(extractor):
    filters = extractor.extract("hybrid work")
    assert filters.work_arrangement == "hybrid"
    assert filters.job_type is None


def test_nothing_mentioned_leaves_filters_empty(extractor):
    filters = extractor.extract("hello")
    assert not filters.has_criteria()
    assert filters.as_dict() == {}

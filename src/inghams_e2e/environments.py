"""Base URLs of every deployed environment."""

DEFAULT_ENVIRONMENTS: dict[str, dict[str, str]] = {
    "dev": {
        "e_cms": "https://inghamsv2-ecms.newdev.hotelplan.co.uk",
        "p_cms": "https://inghamsv2-pcms.newdev.hotelplan.co.uk",
        "inghams": "https://inghams-v2.newdev.hotelplan.co.uk",
        "en_gb": "https://explore-v2.newdev.hotelplan.co.uk/en-gb",
    },
    "dev_test": {
        "e_cms": "https://inghamsv2-ecms.devtest.hotelplan.co.uk",
        "p_cms": "https://inghamsv2-pcms.devtest.hotelplan.co.uk",
        "inghams": "https://inghams-v2.devtest.hotelplan.co.uk",
        "en_gb": "https://explore-v2.devtest.hotelplan.co.uk/en-gb",
    },
    "qa": {
        "e_cms": "https://inghamsv2-ecms.qa.hotelplan.co.uk",
        "p_cms": "https://inghamsv2-pcms.qa.hotelplan.co.uk",
        "inghams": "https://inghams-v2.qa.hotelplan.co.uk",
        "en_gb": "https://explore-v2.qa.hotelplan.co.uk/en-gb",
    },
    "stg": {
        "e_cms": "https://inghamsv2-ecms.stg.hotelplan.co.uk",
        "p_cms": "https://inghamsv2-pcms.stg.hotelplan.co.uk",
        "inghams": "https://inghams-v2.stg.hotelplan.co.uk",
        "en_gb": "https://explore-v2.stg.hotelplan.co.uk/en-gb",
    },
    "prod": {
        "e_cms": "https://inghamsv2-ecms.hotelplan.co.uk",
        "p_cms": "https://inghamsv2-pcms.hotelplan.co.uk",
        "inghams": "https://www.inghams.co.uk",
        "en_gb": "https://www.explore.co.uk",
    },
}

# "staging" is the name the token table and CI pipelines use for stg
DEFAULT_ENVIRONMENTS["staging"] = dict(DEFAULT_ENVIRONMENTS["stg"])

GOOGLE_TEST_LINK = "https://www.google.com/"

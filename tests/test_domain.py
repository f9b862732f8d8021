import dataclasses

import pytest

from profile_pages.db.seed import PROFILE_RECORDS, load_profiles
from profile_pages.domain.user import User
from profile_pages.exceptions import ProfileDataError


def test_from_dict_reads_camel_case_keys():
    user = User.from_dict(
        {
            "slug": "ayse",
            "name": "Ayşe Kaya",
            "avatarUrl": "/a.png",
            "coverUrl": "/c.jpg",
            "mapEmbedUrl": "https://maps.example/embed",
            "siteUrl": "https://ayse.example",
            "modalities": {"online": True, "in_person": False},
        }
    )

    assert user.avatar_url == "/a.png"
    assert user.cover_url == "/c.jpg"
    assert user.map_embed_url == "https://maps.example/embed"
    assert user.site_url == "https://ayse.example"
    assert user.modalities.online is True
    assert user.modalities.in_person is False


def test_optional_fields_default_to_absent():
    user = User.from_dict({"slug": "x", "name": "X"})

    assert user.phone is None
    assert user.specialties == ()
    assert user.faqs == ()
    assert user.social.links() == []
    assert user.stats.has_any is False


def test_empty_strings_count_as_absent():
    user = User.from_dict({"slug": "x", "name": "X", "email": "", "phone": "", "skills": ["", "A"]})

    assert user.email is None
    assert user.phone is None
    assert user.skills == ("A",)


@pytest.mark.parametrize("record", [{"slug": "x"}, {"name": "X"}, {"slug": "", "name": "X"}])
def test_missing_required_field_raises(record):
    with pytest.raises(ProfileDataError) as exc:
        User.from_dict(record)
    assert exc.value.code == "INVALID_PROFILE_DATA"


def test_stats_ignore_non_numeric_values():
    user = User.from_dict(
        {"slug": "x", "name": "X", "stats": {"years": "5", "clients": True, "satisfaction": 0}}
    )

    assert user.stats.years is None
    assert user.stats.clients is None
    assert user.stats.satisfaction == 0
    assert user.stats.has_any is True


def test_user_is_immutable():
    user = User.from_dict({"slug": "x", "name": "X"})
    with pytest.raises(dataclasses.FrozenInstanceError):
        user.name = "Y"


def test_training_meta_line():
    user = User.from_dict(
        {
            "slug": "x",
            "name": "X",
            "trainings": [
                {"title": "A", "org": "Arel SEM", "when": "2024"},
                {"title": "B", "when": "2025"},
                {"title": "C"},
            ],
        }
    )

    assert [t.meta_line for t in user.trainings] == ["Arel SEM • 2024", "2025", None]


def test_to_dict_keeps_registry_shape():
    record = PROFILE_RECORDS[1]
    user = User.from_dict(record)
    data = user.to_dict()

    assert data["slug"] == record["slug"]
    assert data["mapEmbedUrl"] == record["mapEmbedUrl"]
    assert data["faqs"] == record["faqs"]
    assert data["social"] == record["social"]


def test_bundled_records_load():
    users = load_profiles()

    assert [u.slug for u in users] == ["ebru", "derya"]
    assert all(u.slug == u.slug.lower() for u in users)

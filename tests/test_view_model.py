import json

import pytest
from pydantic import ValidationError

from profile_pages.builders.view_model import build_view_model
from profile_pages.constants.page_constants import PageDefaults


def test_theme_defaults(make_user):
    vm = build_view_model(make_user())

    assert vm.theme.primary == "#2563eb"
    assert vm.theme.accent == "#f59e0b"


def test_theme_from_profile(ebru):
    vm = build_view_model(ebru)

    assert vm.theme.primary == "#0ea5e9"


def test_partial_theme(make_user):
    vm = build_view_model(make_user(theme={"accent": "#111111"}))

    assert vm.theme.primary == PageDefaults.PRIMARY_COLOR
    assert vm.theme.accent == "#111111"


def test_minimal_profile_hides_every_optional_section(make_user):
    vm = build_view_model(make_user())
    sections = vm.sections.model_dump()

    assert not any(sections.values()), sections
    assert vm.whatsapp_href is None
    assert vm.mail_href is None
    assert vm.map_src is None
    assert vm.faq_json_ld is None
    assert vm.stats == []
    assert vm.hero_subtitle is None
    assert vm.modality_note is None


def test_no_contact_section_without_contact_fields(make_user):
    vm = build_view_model(make_user(specialties=["Aile"], whatsapp="+90 555"))

    assert vm.sections.contact is False
    assert vm.whatsapp_href is not None


def test_contact_section_visible_with_any_contact_field(make_user):
    for fields in ({"phone": "1"}, {"email": "a@b.c"}, {"address": "Ankara"}, {"mapEmbedUrl": "https://m"}):
        assert build_view_model(make_user(**fields)).sections.contact is True, fields


def test_combined_sections_absent_without_content(make_user):
    vm = build_view_model(make_user(services=[{"title": "A", "desc": "B"}]))

    assert vm.sections.approach is False
    assert vm.sections.certificates is False


def test_approach_section_needs_methods_or_credentials(make_user):
    vm = build_view_model(make_user(credentials=["Lisans"]))

    assert vm.sections.approach is True
    assert vm.sections.credentials is True
    assert vm.sections.methods is False


def test_certificates_section_needs_trainings_or_skills(make_user):
    vm = build_view_model(make_user(skills=["BDT"]))

    assert vm.sections.certificates is True
    assert vm.sections.skills is True
    assert vm.sections.trainings is False


def test_sections_for_derya(derya):
    vm = build_view_model(derya)
    s = vm.sections

    assert s.specialties and s.services and s.testimonials and s.faqs and s.contact
    assert s.approach and s.methods and s.credentials
    assert s.social
    assert not s.certificates
    assert not s.availability
    assert not s.stats


def test_stat_cards(ebru):
    vm = build_view_model(ebru)

    assert [(c.key, c.value, c.label) for c in vm.stats] == [
        ("years", "2+", "Yıl Deneyim"),
        ("clients", "200+", "Danışan/Çift"),
        ("satisfaction", "%94", "Memnuniyet"),
    ]
    assert vm.sections.stats is True


def test_each_stat_is_independently_optional(make_user):
    vm = build_view_model(make_user(stats={"clients": 0}))

    assert [c.key for c in vm.stats] == ["clients"]
    assert vm.stats[0].value == "0+"
    assert vm.sections.stats is True


def test_service_cards_fall_back_to_session_label(make_user):
    vm = build_view_model(
        make_user(
            services=[
                {"title": "Aile", "desc": "İletişim", "duration": "50 dk", "price": "₺1.500"},
                {"title": "Çift", "desc": "Güven"},
            ]
        )
    )

    assert [(s.duration_label, s.price) for s in vm.services] == [
        ("50 dk", "₺1.500"),
        ("Seans", None),
    ]


def test_hero_subtitle(make_user):
    assert build_view_model(make_user(title="Danışman", city="Ankara")).hero_subtitle == "Danışman – Ankara"
    assert build_view_model(make_user(city="Ankara")).hero_subtitle == "Ankara"


def test_skills_are_not_sliced(ebru):
    vm = build_view_model(ebru)

    assert len(vm.skills) == 23
    assert vm.skill_cloud_limit == 15


def test_skill_cloud_limit_from_environment(monkeypatch, ebru):
    monkeypatch.setenv("SKILL_CLOUD_LIMIT", "10")
    assert build_view_model(ebru).skill_cloud_limit == 10

    monkeypatch.setenv("SKILL_CLOUD_LIMIT", "many")
    assert build_view_model(ebru).skill_cloud_limit == 15


def test_map_embed_src_falls_back_to_default(make_user):
    vm = build_view_model(make_user(phone="123"))

    assert vm.map_src is None
    assert vm.map_embed_src == PageDefaults.MAP_EMBED_URL


def test_online_modality(ebru, derya):
    assert build_view_model(ebru).modality_note == "Online seans seçeneğimiz mevcut."
    assert build_view_model(ebru).online is True
    assert build_view_model(derya).online is False


def test_social_links_in_declaration_order(derya, make_user):
    vm = build_view_model(derya)

    assert [(link.label, link.url) for link in vm.social_links] == [
        ("Instagram", "https://instagram.com/derya.danismanlik"),
        ("LinkedIn", "https://www.linkedin.com/in/deryayilmaz"),
    ]
    only_linkedin = build_view_model(make_user(social={"linkedin": "https://l", "instagram": ""}))
    assert [link.network for link in only_linkedin.social_links] == ["linkedin"]


def test_footer_brand(make_user, derya):
    assert build_view_model(make_user()).footer_brand == "Profil"
    assert build_view_model(derya).footer_brand == "Derya Yılmaz Danışmanlık"


def test_view_model_is_rebuilt_not_shared(ebru):
    first = build_view_model(ebru)
    first.skills.append("extra")

    assert "extra" not in build_view_model(ebru).skills
    assert "extra" not in ebru.skills


def test_view_model_is_json_serializable(derya):
    payload = build_view_model(derya).model_dump(mode="json")

    assert json.loads(json.dumps(payload, ensure_ascii=False))["slug"] == "derya"


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_skill_cloud_limit_is_rejected(make_user, limit):
    with pytest.raises(ValidationError):
        build_view_model(make_user(skills=["a", "b"]), skill_cloud_limit=limit)


def test_whole_float_stats_render_without_fraction(make_user):
    vm = build_view_model(
        make_user(stats={"years": 2.0, "clients": 150.5, "satisfaction": 94.0})
    )

    assert [c.value for c in vm.stats] == ["2+", "150.5+", "%94"]


def test_availability_items(ebru):
    vm = build_view_model(ebru)

    assert vm.sections.availability is True
    assert [(a.days, a.hours) for a in vm.availability] == [
        ("Hafta içi", "19:00–22:00"),
        ("Hafta sonu", "09:00–23:00"),
    ]


def test_availability_hidden_without_slots(make_user):
    assert build_view_model(make_user()).sections.availability is False
    assert build_view_model(make_user()).availability == []


def test_testimonial_and_faq_cards(derya):
    vm = build_view_model(derya)

    assert vm.sections.testimonials is True
    assert [t.name for t in vm.testimonials] == ["A. K.", "N. T."]
    assert vm.testimonials[0].text.startswith("Eşimle iletişimimiz")
    assert vm.sections.faqs is True
    assert [(f.q, f.a) for f in vm.faqs] == [
        (
            "Seanslar online yapılabiliyor mu?",
            "Evet, güvenli bir platform üzerinden online seanslar yapıyorum.",
        ),
        (
            "Gizlilik nasıl sağlanıyor?",
            "Tüm süreç KVKK ve meslek etik ilkeleri çerçevesinde gizlidir.",
        ),
    ]

import random

import pytest

from jobboard.services import captcha_service


class TestCaptcha:
    def test_generate_in_range(self):
        rng = random.Random(1234)
        for _ in range(200):
            a, b = captcha_service.generate(rng)
            assert 1 <= a <= 10
            assert 1 <= b <= 10

    def test_verify(self):
        assert captcha_service.verify(3, 4, 7)
        assert not captcha_service.verify(3, 4, 8)
        assert not captcha_service.verify(3, 4, None)

    @pytest.mark.parametrize("answer", ["7", " 7 ", 7.0])
    def test_verify_accepts_whole_number_forms(self, answer):
        assert captcha_service.verify(3, 4, answer)

    @pytest.mark.parametrize("answer", [7.5, "seven", "7.5", "", True, [7], {"answer": 7}])
    def test_verify_rejects_non_integers(self, answer):
        assert not captcha_service.verify(3, 4, answer)

    def test_question(self):
        assert captcha_service.question(2, 9) == "What is 2 + 9?"

    def test_challenge_endpoint(self, client):
        r = client.get("/api/v1/captcha")
        assert r.status_code == 200
        data = r.json()
        assert 1 <= data["a"] <= 10
        assert 1 <= data["b"] <= 10
        assert data["question"] == f"What is {data['a']} + {data['b']}?"

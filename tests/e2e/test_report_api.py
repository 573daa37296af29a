"""End-to-end tests for reporting comments and reviewing reports."""

from inkwell.domain.value import UserRole
from tests.conftest import make_comment, make_post, make_user, token_for
from tests.harness import create_api_fixture

api = create_api_fixture()

REASON = "Spam links to a shady site"


def auth(user):
    return {"auth_token": token_for(user)}


class TestReportComment:
    """POST /posts/{post_id}/comments/{comment_id}/report."""

    def test_each_user_reports_once(self, api):
        """A duplicate report conflicts; another reporter is accepted."""
        # Arrange
        author = make_user("alice")
        bob = make_user("bob")
        carol = make_user("carol")
        post = make_post(author)
        comment = make_comment(post, author)
        api.seed(author, bob, carol, post, comment)
        url = f"/posts/{post.id}/comments/{comment.id}/report"

        # Act
        first = api.client.post(url, json={"reason": REASON}, cookies=auth(bob))
        duplicate = api.client.post(url, json={"reason": REASON}, cookies=auth(bob))
        other = api.client.post(url, json={"reason": REASON}, cookies=auth(carol))

        # Assert
        assert first.status_code == 201
        assert first.json()["status"] == "PENDING"
        assert duplicate.status_code == 409
        assert duplicate.json()["message"] == "You have already reported this comment"
        assert other.status_code == 201

    def test_short_reason_fails_body_validation(self, api):
        """Reasons under ten characters never reach the domain."""
        # Arrange
        author = make_user("alice")
        post = make_post(author)
        comment = make_comment(post, author)
        api.seed(author, post, comment)

        # Act
        response = api.client.post(
            f"/posts/{post.id}/comments/{comment.id}/report",
            json={"reason": "bad"},
            cookies=auth(author),
        )

        # Assert
        assert response.status_code == 422


class TestReviewReports:
    """GET and PATCH /reports/comments."""

    def test_admin_lists_and_resolves_reports(self, api):
        """Admins page through reports and change their status."""
        # Arrange
        admin = make_user("root", role=UserRole.ADMIN)
        author = make_user("alice")
        bob = make_user("bob")
        post = make_post(author)
        comment = make_comment(post, author)
        api.seed(admin, author, bob, post, comment)
        report = api.client.post(
            f"/posts/{post.id}/comments/{comment.id}/report",
            json={"reason": REASON},
            cookies=auth(bob),
        ).json()

        # Act
        listing = api.client.get("/reports/comments", cookies=auth(admin))
        updated = api.client.patch(
            f"/reports/comments/{report['id']}",
            json={"status": "RESOLVED"},
            cookies=auth(admin),
        )

        # Assert
        assert listing.status_code == 200
        assert [r["id"] for r in listing.json()["reports"]] == [report["id"]]
        assert listing.json()["pagination"]["total"] == 1
        assert updated.status_code == 200
        assert updated.json()["status"] == "RESOLVED"

    def test_regular_user_is_forbidden(self, api):
        """Report review is admin only."""
        # Arrange
        bob = make_user("bob")
        api.seed(bob)

        # Act
        response = api.client.get("/reports/comments", cookies=auth(bob))

        # Assert
        assert response.status_code == 403
        assert response.json()["message"] == "Admin access required"

    def test_unknown_status_is_rejected(self, api):
        """Statuses outside the review workflow fail validation."""
        # Arrange
        admin = make_user("root", role=UserRole.ADMIN)
        api.seed(admin)

        # Act
        response = api.client.patch(
            "/reports/comments/00000000-0000-0000-0000-000000000000",
            json={"status": "ESCALATED"},
            cookies=auth(admin),
        )

        # Assert
        assert response.status_code == 422

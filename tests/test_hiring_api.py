"""
End-to-end hiring workflow over HTTP: company and applicant endpoints, search.
"""
from conftest import auth_headers, create_job

from recruitme.db.models import JobStatus, User


def post_job(client, company, **overrides):
    payload = {
        "title": "Backend Engineer",
        "description": "Build and run our hiring APIs.",
        "salary": "120000.00",
        "skills": ["python", "postgresql"],
    }
    payload.update(overrides)
    response = client.post("/company/job", json=payload, headers=auth_headers(company))
    assert response.status_code == 200
    return response.json()["id"]


def test_full_hiring_workflow(client, company, applicant):
    company_headers = auth_headers(company)
    applicant_headers = auth_headers(applicant)
    job_id = post_job(client, company)

    # Drafts cannot be applied to
    response = client.post(f"/applicant/job/{job_id}/apply", headers=applicant_headers)
    assert response.status_code == 404

    response = client.post(f"/company/job/{job_id}/activate", headers=company_headers)
    assert response.json() == {"message": "Job activated"}

    response = client.post(f"/applicant/job/{job_id}/apply", headers=applicant_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Application submitted"

    response = client.post(f"/applicant/job/{job_id}/apply", headers=applicant_headers)
    assert response.status_code == 400
    assert response.json() == {"detail": "Already applied"}

    response = client.put(
        f"/company/job/{job_id}/applicant/{applicant.id}/rating",
        json={"rating": "hirable"},
        headers=company_headers,
    )
    assert response.json() == {"message": "Rating updated"}

    response = client.post(f"/applicant/job/{job_id}/offer/accept", headers=applicant_headers)
    assert response.status_code == 404
    assert response.json() == {"detail": "Offer not found"}

    response = client.post(f"/company/job/{job_id}/applicant/{applicant.id}/offer", headers=company_headers)
    assert response.json() == {"message": "Offer extended"}

    response = client.post(f"/applicant/job/{job_id}/offer/accept", headers=applicant_headers)
    assert response.json() == {"message": "Offer accepted"}

    response = client.get(f"/company/job/{job_id}", headers=company_headers)
    assert response.status_code == 200
    job = response.json()
    assert job["status"] == "open"
    assert job["applicant_count"] == 1
    assert job["hired_count"] == 1
    assert job["post_date"] is not None

    response = client.get(f"/company/job/{job_id}/applicants", headers=company_headers)
    applicants = response.json()
    assert applicants["total"] == 1
    assert applicants["applicants"][0]["rating"] == "hirable"
    assert applicants["applicants"][0]["offer_status"] == "accepted"

    response = client.delete(f"/applicant/job/{job_id}/offer/accept", headers=applicant_headers)
    assert response.json() == {"message": "Acceptance rescinded"}

    response = client.post(f"/applicant/job/{job_id}/offer/reject", headers=applicant_headers)
    assert response.json() == {"message": "Offer rejected"}

    response = client.delete(f"/company/job/{job_id}/applicant/{applicant.id}/offer", headers=company_headers)
    assert response.json() == {"message": "Offer rescinded"}

    response = client.post(f"/company/job/{job_id}/close", headers=company_headers)
    assert response.json() == {"message": "Job closed"}

    response = client.post(f"/company/job/{job_id}/reopen", headers=company_headers)
    assert response.json() == {"message": "Job reopened"}

    response = client.delete(f"/applicant/job/{job_id}/apply", headers=applicant_headers)
    assert response.json() == {"message": "Application withdrawn"}

    response = client.delete(f"/applicant/job/{job_id}/apply", headers=applicant_headers)
    assert response.status_code == 404


def test_create_job_validation(client, company):
    headers = auth_headers(company)

    assert client.post("/company/job", json={"title": ""}, headers=headers).status_code == 422
    assert client.post("/company/job", json={"title": "Ok", "salary": "-1"}, headers=headers).status_code == 422


def test_invalid_rating_is_rejected(client, company, applicant, open_job):
    client.post(f"/applicant/job/{open_job.id}/apply", headers=auth_headers(applicant))

    response = client.put(
        f"/company/job/{open_job.id}/applicant/{applicant.id}/rating",
        json={"rating": "superstar"},
        headers=auth_headers(company),
    )

    assert response.status_code == 422


def test_other_company_sees_not_found(client, other_company, open_job):
    headers = auth_headers(other_company)

    assert client.get(f"/company/job/{open_job.id}", headers=headers).status_code == 404
    assert client.post(f"/company/job/{open_job.id}/close", headers=headers).status_code == 404
    assert client.get(f"/company/job/{open_job.id}/applicants", headers=headers).status_code == 404


def test_reopen_of_open_job_is_not_found(client, company, open_job):
    response = client.post(f"/company/job/{open_job.id}/reopen", headers=auth_headers(company))

    assert response.status_code == 404
    assert response.json() == {"detail": "Job not found"}


def test_company_profile(client, db, company, applicant, open_job):
    create_job(db, company, title="Archivist")
    client.post(f"/applicant/job/{open_job.id}/apply", headers=auth_headers(applicant))

    response = client.get("/company/profile", headers=auth_headers(company))

    assert response.status_code == 200
    profile = response.json()
    assert profile["name"] == "Acme Corp"
    assert [job["title"] for job in profile["jobs"]] == ["Archivist", "Data Engineer"]
    counts = {job["title"]: job["applicant_count"] for job in profile["jobs"]}
    assert counts == {"Archivist": 0, "Data Engineer": 1}


def test_update_company_profile(client, company):
    headers = auth_headers(company)

    response = client.put("/company/profile", json={"name": "Acme Holdings"}, headers=headers)

    assert response.json() == {"message": "Profile updated"}
    assert client.get("/company/profile", headers=headers).json()["name"] == "Acme Holdings"


def test_applicant_profile_shows_application_status(client, company, applicant, other_applicant, open_job):
    client.post(f"/applicant/job/{open_job.id}/apply", headers=auth_headers(applicant))
    client.post(f"/applicant/job/{open_job.id}/apply", headers=auth_headers(other_applicant))
    headers = auth_headers(applicant)

    response = client.put("/applicant/profile", json={"skills": ["sql", "python", "sql"]}, headers=headers)
    assert response.json() == {"message": "Profile updated"}

    profile = client.get("/applicant/profile", headers=headers).json()
    assert profile["name"] == "Ada Lovelace"
    assert profile["skills"] == ["python", "sql"]
    assert len(profile["applications"]) == 1
    application = profile["applications"][0]
    assert application["job_id"] == open_job.id
    assert application["company_name"] == "Acme Corp"
    assert application["status"] == "pending"
    assert application["applicant_count"] == 2

    client.post(f"/company/job/{open_job.id}/applicant/{applicant.id}/offer", headers=auth_headers(company))
    profile = client.get("/applicant/profile", headers=headers).json()
    assert profile["applications"][0]["status"] == "offered"


def test_update_applicant_name_keeps_skills(client, applicant):
    headers = auth_headers(applicant)
    client.put("/applicant/profile", json={"skills": ["go"]}, headers=headers)

    client.put("/applicant/profile", json={"name": "Augusta Ada King"}, headers=headers)

    profile = client.get("/applicant/profile", headers=headers).json()
    assert profile["name"] == "Augusta Ada King"
    assert profile["skills"] == ["go"]


def test_search_returns_only_open_jobs(client, company, other_company):
    open_id = post_job(client, company, title="Open Role", skills=["Python"])
    post_job(client, company, title="Draft Role", skills=["python"])
    closed_id = post_job(client, company, title="Closed Role", skills=["python"])
    other_id = post_job(client, other_company, title="Go Role", skills=["go"])
    for job_id, owner in ((open_id, company), (closed_id, company), (other_id, other_company)):
        client.post(f"/company/job/{job_id}/activate", headers=auth_headers(owner))
    client.post(f"/company/job/{closed_id}/close", headers=auth_headers(company))

    response = client.get("/jobs/search")
    assert response.status_code == 200
    assert {job["title"] for job in response.json()["jobs"]} == {"Open Role", "Go Role"}

    by_skill = client.get("/jobs/search", params={"skill": "pyth"}).json()
    assert by_skill["total"] == 1
    assert by_skill["jobs"][0]["id"] == open_id
    assert by_skill["jobs"][0]["company_name"] == "Acme Corp"
    assert by_skill["jobs"][0]["skills"] == ["Python"]

    by_company = client.get("/jobs/search", params={"company": "glob"}).json()
    assert [job["id"] for job in by_company["jobs"]] == [other_id]

    both = client.get("/jobs/search", params={"skill": "go", "company": "acme"}).json()
    assert both == {"jobs": [], "total": 0}


def test_search_pagination(client, db, company):
    for title in ("A", "B", "C"):
        create_job(db, company, title=title, status=JobStatus.OPEN)

    response = client.get("/jobs/search", params={"offset": 1, "limit": 1})

    assert response.json()["total"] == 3
    assert len(response.json()["jobs"]) == 1
    assert client.get("/jobs/search", params={"limit": 0}).status_code == 422


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["database"] == "connected"


def test_apply_with_token_for_deleted_account(client, db, applicant, open_job):
    headers = auth_headers(applicant)
    db.query(User).filter(User.id == applicant.id).delete(synchronize_session=False)
    db.commit()

    response = client.post(f"/applicant/job/{open_job.id}/apply", headers=headers)

    assert response.status_code == 401
    assert response.json() == {"detail": "Account no longer exists"}

class TestCompaniesCRUD:
    def test_create_company(self, client):
        r = client.post("/api/companies", json={
            "id": "c-1",
            "name": "Initech",
            "website": "https://initech.com",
            "contacts": [{"name": "Bill", "email": "bill@initech.com", "role": "CTO"}],
            "skillsToPitch": ["Python", "Data"],
        })
        assert r.status_code == 200
        company = r.json()["company"]
        assert company["id"] == "c-1"
        assert company["status"] == "NEW"
        assert company["contacts"][0]["role"] == "CTO"
        assert company["skillsToPitch"] == ["Python", "Data"]
        assert company["analysis"] is None

    def test_create_duplicate_by_website_returns_existing(self, client):
        first = client.post("/api/companies", json={"name": "Initech", "website": "https://initech.com"}).json()
        second = client.post("/api/companies", json={"name": "Initech Ltd", "website": "www.initech.com/about"}).json()

        assert second["success"] is True
        assert second["company"]["id"] == first["company"]["id"]
        assert second["company"]["name"] == "Initech"
        assert client.get("/api/companies").json()["total"] == 1

    def test_create_duplicate_by_name_returns_existing(self, client):
        first = client.post("/api/companies", json={"name": "Initech"}).json()
        second = client.post("/api/companies", json={"name": "  initech "}).json()
        assert second["company"]["id"] == first["company"]["id"]

    def test_get_company(self, client):
        company_id = client.post("/api/companies", json={"name": "Hooli"}).json()["company"]["id"]
        r = client.get(f"/api/companies/{company_id}")
        assert r.status_code == 200
        assert r.json()["name"] == "Hooli"

    def test_get_missing_company(self, client):
        assert client.get("/api/companies/nope").status_code == 404

    def test_update_company_with_analysis(self, client):
        company_id = client.post("/api/companies", json={"name": "Hooli"}).json()["company"]["id"]

        r = client.put(f"/api/companies/{company_id}", json={
            "status": "ANALYZED",
            "analysis": {
                "summary": "Search and compression",
                "painPoints": ["latency"],
                "socialLinks": [{"platform": "LinkedIn", "url": "https://linkedin.com/company/hooli"}],
                "matchingSkills": ["Performance tuning"],
                "recommendedApproach": "Lead with benchmarks",
            },
        })
        assert r.status_code == 200
        company = r.json()["company"]
        assert company["status"] == "ANALYZED"
        assert company["name"] == "Hooli"
        assert company["analysis"]["socialLinks"][0]["platform"] == "LinkedIn"

    def test_update_missing_company_reports_success(self, client):
        r = client.put("/api/companies/missing", json={"name": "Ghost"})
        assert r.status_code == 200
        assert r.json()["success"] is True
        assert client.get("/api/companies").json()["total"] == 0

    def test_delete_company(self, client):
        company_id = client.post("/api/companies", json={"name": "Hooli"}).json()["company"]["id"]
        r = client.delete(f"/api/companies/{company_id}")
        assert r.json() == {"success": True, "id": company_id}
        assert client.get(f"/api/companies/{company_id}").status_code == 404


class TestCompaniesListing:
    def test_search_name_or_website(self, client):
        client.post("/api/companies", json={"name": "Initech", "website": "https://initech.com"})
        client.post("/api/companies", json={"name": "Globex", "website": "https://globex.io"})

        assert client.get("/api/companies?search=INITECH").json()["total"] == 1
        r = client.get("/api/companies?search=.io").json()
        assert r["total"] == 1
        assert r["items"][0]["name"] == "Globex"

    def test_search_folds_non_ascii_case(self, client):
        client.post("/api/companies", json={"name": "ÉCOLE NUMÉRIQUE"})
        client.post("/api/companies", json={"name": "Globex"})

        r = client.get("/api/companies", params={"search": "école"}).json()
        assert r["total"] == 1
        assert r["items"][0]["name"] == "ÉCOLE NUMÉRIQUE"

    def test_filter_by_status(self, client):
        client.post("/api/companies", json={"name": "Initech"})
        client.post("/api/companies", json={"name": "Globex", "status": "CONTACTED"})

        assert client.get("/api/companies?status=CONTACTED").json()["total"] == 1
        assert client.get("/api/companies").json()["total"] == 2

    def test_sort_by_name(self, client):
        client.post("/api/companies", json={"name": "Zeta"})
        client.post("/api/companies", json={"name": "Alpha"})

        r = client.get("/api/companies?sortBy=name&sortOrder=asc").json()
        assert [c["name"] for c in r["items"]] == ["Alpha", "Zeta"]

from rustdrill.drills.jobs import JobStatus, run_jobs


def test_all_jobs_complete(capsys):
    status = run_jobs(3, 0.01, 0.005)
    assert status.jobs_completed == 3
    lines = capsys.readouterr().out.splitlines()
    assert lines
    assert all(line == "waiting... " for line in lines)


def test_no_jobs_means_no_waiting(capsys):
    status = run_jobs(0, 0.01, 0.005)
    assert status.jobs_completed == 0
    assert capsys.readouterr().out == ""


def test_status_compares_by_count():
    assert run_jobs(2, 0.001, 0.001) == JobStatus(jobs_completed=2)


def test_slow_jobs_cause_repeated_polls(capsys):
    run_jobs(2, 0.05, 0.01)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) >= 2
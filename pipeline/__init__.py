# pipeline/ — offline data scripts for Forest Watch.
#
#   generate_readings  → write a simulated sensor CSV to data/ for the dashboard

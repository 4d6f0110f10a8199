from conventional_review.main import main

main()
